import logging

from roster_extractor.processors import (
    DocumentAssembler,
    LeadingNumeralClassifier,
)

LINES = [
    "١ خالد عمر فاروق",
    "اللجنة الفرعية رقم",
    "مدرسة النصر الإعدادية",
    "٠٠٣",
    "١ محمد احمد علي",
    "١ محمدمحمدمحمد",
    "اللجنة الفرعية رقم",
    "مدرسة الامل الابتدائية",
]


def test_assembly_tracks_detected_and_kept_committees(context):
    result = DocumentAssembler(context, LINES).run()

    assert [c.name for c in result.committees] == ["مدرسة النصر الإعدادية"]
    assert result.detected_committee_names == ("مدرسة النصر الإعدادية", "مدرسة الامل الابتدائية")
    assert result.line_count == len(LINES)


def test_assembly_stats(context):
    DocumentAssembler(context, LINES).run()
    stats = context.stats

    assert stats.total_lines == 8
    assert stats.header_lines == 2
    assert stats.voter_lines == 3
    assert stats.unattached_voter_lines == 1
    assert stats.noise_lines == 1
    assert stats.unclassified_lines == 2
    assert stats.voters_accepted == 1
    assert stats.total_rejected == 1
    assert stats.committees_flushed == 1
    assert stats.committees_discarded == 1


def test_assembler_uses_given_classifier(context):
    assembler = DocumentAssembler(context, LINES, classifier=LeadingNumeralClassifier())

    assert assembler.classifier.name == "leading-numeral"
    assert len(assembler.run().committees) == 1


def test_empty_input(context):
    result = DocumentAssembler(context, []).run()

    assert result.committees == ()
    assert result.detected_committee_names == ()
    assert result.line_count == 0


def test_flush_and_discard_are_logged_in_debug_mode(context, caplog):
    context.config.debug = True
    caplog.set_level(logging.DEBUG, logger="roster_extractor")

    DocumentAssembler(context, LINES).run()

    messages = [r.getMessage() for r in caplog.records if r.name == "roster_extractor.DocumentAssembler"]
    assert "Flushed committee name=مدرسة النصر الإعدادية voters=1" in messages
    assert "Discarded empty committee name=مدرسة الامل الابتدائية" in messages
