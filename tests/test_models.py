import pytest

from roster_extractor.models import (
    Committee,
    ExportRow,
    ExtractedDocument,
    OpenCommittee,
    Voter,
)


def make_document():
    return ExtractedDocument(committees=(
        Committee(
            name="مدرسة النصر الإعدادية",
            sub_number="003",
            address="شارع الجمهورية",
            voters=(Voter("1", "محمد احمد علي"), Voter("2", "سارة محمود حسن")),
        ),
        Committee(name="معهد الفتيات الازهري", sub_number="012", voters=(Voter("3", "خالد عمر فاروق"),)),
    ))


def test_totals_are_derived():
    document = make_document()

    assert document.total_voters == 3
    assert document.total_committees == 2
    assert ExtractedDocument().total_voters == 0


def test_totals_cannot_be_set():
    document = make_document()

    with pytest.raises(AttributeError):
        document.total_voters = 10


def test_to_dict_matches_output_contract():
    data = make_document().to_dict()

    assert data["totalVoters"] == 3
    assert data["totalCommittees"] == 2

    first, second = data["committees"]
    assert first["subNumber"] == "003"
    assert first["address"] == "شارع الجمهورية"
    assert "location" not in first
    assert "address" not in second
    assert first["voters"][0] == {"serialNumber": "1", "fullName": "محمد احمد علي"}


def test_from_dict_recomputes_totals():
    data = make_document().to_dict()
    data["totalVoters"] = 999

    document = ExtractedDocument.from_dict(data)

    assert document == make_document()
    assert document.total_voters == 3


@pytest.mark.parametrize("sub_number", ["3", "0003", "٠٠٣", "abc", 3])
def test_from_dict_rejects_malformed_sub_number(sub_number):
    data = make_document().to_dict()
    data["committees"][0]["subNumber"] = sub_number

    with pytest.raises(ValueError):
        ExtractedDocument.from_dict(data)


def test_from_dict_rejects_committee_without_voters():
    data = make_document().to_dict()
    data["committees"][1]["voters"] = []

    with pytest.raises(ValueError):
        ExtractedDocument.from_dict(data)


def test_rows_repeat_committee_per_voter():
    rows = make_document().to_rows()

    assert rows[0] == ExportRow("مدرسة النصر الإعدادية", "003", "1", "محمد احمد علي")
    assert [r.committee_sub_number for r in rows] == ["003", "003", "012"]
    assert rows[2].to_dict()["voter_full_name"] == "خالد عمر فاروق"


def test_open_committee_freezes_voters():
    open_committee = OpenCommittee(name="مدرسة النصر")
    assert not open_committee.has_voters

    open_committee.add_voters([Voter("1", "محمد احمد علي")])
    committee = open_committee.freeze()

    assert committee.voters == (Voter("1", "محمد احمد علي"),)
    assert committee.sub_number == "000"

    open_committee.add_voters([Voter("2", "سارة محمود حسن")])
    assert committee.voters_count == 1
