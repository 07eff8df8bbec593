import pytest

from roster_extractor import (
    ConfigurationError,
    NoCommitteesFoundError,
    NoVotersFoundError,
    Voter,
    extract_document,
)

SINGLE_COMMITTEE = "\n".join([
    "اللجنة الفرعية رقم",
    "مدرسة النصر الإعدادية",
    "٠٠٣",
    "١ محمد احمد علي",
    "٢ سارة محمود حسن",
])

MULTI_COMMITTEE = "\n".join([
    "كشف بأسماء الناخبين باللجنة الفرعية رقم",
    "مدرسة النصر الإعدادية",
    "٠٠١",
    "مسلسل الاسم",
    "١ محمد احمد علي",
    "٢ سارة محمود حسن",
    "الصفحة رقم ١ من ٢",
    "اللجنة الفرعية رقم",
    "مدرسة الامل الابتدائية",
    "٠٠٢",
    "كشف بأسماء الناخبين باللجنة الفرعية",
    "معهد الفتيات الازهري",
    "١٢",
    "٣ خالد عمر فاروق",
])

PACKED_COMMITTEE = "\n".join([
    "اللجنة الفرعية رقم",
    "مدرسة النصر الإعدادية",
    "٠٠٣",
    "محمد احمد علي ١ سارة محمود حسن ٢",
])


def test_single_committee_example():
    document = extract_document(SINGLE_COMMITTEE)

    assert document.total_committees == 1
    assert document.total_voters == 2

    committee = document.committees[0]
    assert committee.name == "مدرسة النصر الإعدادية"
    assert committee.sub_number == "003"
    assert committee.voters == (
        Voter("1", "محمد احمد علي"),
        Voter("2", "سارة محمود حسن"),
    )


def test_empty_committees_are_discarded():
    document = extract_document(MULTI_COMMITTEE)

    assert [c.name for c in document.committees] == ["مدرسة النصر الإعدادية", "معهد الفتيات الازهري"]
    assert [c.sub_number for c in document.committees] == ["001", "012"]
    assert all(c.voters for c in document.committees)


def test_totals_are_derived_from_committees():
    document = extract_document(MULTI_COMMITTEE)

    assert document.total_voters == sum(len(c.voters) for c in document.committees) == 3
    assert document.total_committees == len(document.committees) == 2


def test_sub_numbers_are_three_ascii_digits():
    document = extract_document(MULTI_COMMITTEE)

    for committee in document.committees:
        assert len(committee.sub_number) == 3
        assert committee.sub_number.isascii() and committee.sub_number.isdigit()


def test_voter_rows_before_first_header_are_ignored():
    document = extract_document("١ خالد عمر فاروق\n" + SINGLE_COMMITTEE)

    assert document.total_voters == 2


def test_noise_only_input_reports_line_count():
    text = "\n".join([
        "الصفحة رقم ١ من ١٠",
        "انتخابات مجلس النواب ٢٠٢٥",
        "",
        "نموذج رقم ٥ انتخابات",
    ])

    with pytest.raises(NoCommitteesFoundError) as exc_info:
        extract_document(text)

    assert exc_info.value.line_count == 3
    assert exc_info.value.details["line_count"] == 3
    assert "3" in exc_info.value.message


def test_committee_without_valid_voters_reports_names():
    text = "\n".join([
        "اللجنة الفرعية رقم",
        "١٢٣٤٥ محمد احمد علي",
        "٢ محمدمحمدمحمد",
    ])

    with pytest.raises(NoVotersFoundError) as exc_info:
        extract_document(text)

    assert exc_info.value.committee_names == ["اللجنة الفرعية رقم"]
    assert "اللجنة الفرعية رقم" in exc_info.value.message


def test_packed_layout_with_packed_scan_classifier():
    document = extract_document(PACKED_COMMITTEE, classifier="packed-scan")

    assert [v.serial_number for v in document.committees[0].voters] == ["1", "2"]


def test_packed_layout_with_leading_numeral_classifier_finds_no_voters():
    with pytest.raises(NoVotersFoundError):
        extract_document(PACKED_COMMITTEE, classifier="leading-numeral")


def test_classifier_from_environment(monkeypatch):
    monkeypatch.setenv("ROSTER_CLASSIFIER", "packed-scan")

    with pytest.raises(NoVotersFoundError):
        extract_document(SINGLE_COMMITTEE)


def test_unknown_classifier_is_a_configuration_error():
    with pytest.raises(ConfigurationError):
        extract_document(SINGLE_COMMITTEE, classifier="nope")


def test_lookahead_outside_range_is_a_configuration_error(monkeypatch):
    monkeypatch.setenv("ROSTER_LOOKAHEAD_LINES", "5")

    with pytest.raises(ConfigurationError):
        extract_document(SINGLE_COMMITTEE)


def test_serial_ceiling_never_emits_large_serials():
    text = SINGLE_COMMITTEE + "\nمحمد احمد علي ٢٠٢٥٠ خالد عمر فاروق ٣"

    document = extract_document(text)

    serials = [int(v.serial_number) for c in document.committees for v in c.voters]
    assert serials == [1, 2, 3]


def test_overlong_numeral_run_is_dropped_not_raised():
    text = SINGLE_COMMITTEE + "\nمحمد احمد علي " + "١" * 5000

    document = extract_document(text)

    assert document.total_voters == 2
