"""Unit tests for YAML document I/O and export."""

from pathlib import Path

import pytest

from ephys_meta.exceptions import DocumentIOError
from ephys_meta.yaml_io import (
    decode_document,
    encode_document,
    export_document,
    export_filename,
    read_document,
    write_document,
)

pytestmark = pytest.mark.unit


class TestEncoding:
    """Test deterministic encoding and decoding."""

    def test_Should_SortKeys_When_Encoded(self):
        text = encode_document({"session_id": "s1", "lab": "Frank Lab"})

        assert text == "lab: Frank Lab\nsession_id: s1\n"

    def test_Should_KeepUnicode_When_Encoded(self):
        assert "μm" in encode_document({"units": "μm"})

    def test_Should_KeepTimestampsAsText_When_Decoded(self):
        document = decode_document("date_of_birth: 2023-01-17T00:00:00.000Z\n")

        assert document["date_of_birth"] == "2023-01-17T00:00:00.000Z"

    def test_Should_KeepIntegerMapKeys_When_Decoded(self):
        document = decode_document(encode_document({"map": {0: 0, 1: 5}}))

        assert document["map"] == {0: 0, 1: 5}

    def test_Should_RaiseDocumentIOError_When_YamlMalformed(self):
        with pytest.raises(DocumentIOError):
            decode_document("lab: [unclosed\n")

    def test_Should_ReproduceDocument_When_ValidDocumentEncoded(self, valid_document):
        assert decode_document(encode_document(valid_document)) == valid_document


class TestFiles:
    def test_Should_WriteAndRead_When_PathNested(self, tmp_path: Path, valid_document):
        path = write_document(tmp_path / "a" / "b" / "session.yml", valid_document)

        assert read_document(path) == valid_document

    def test_Should_RaiseDocumentIOError_When_FileMissing(self, tmp_path: Path):
        with pytest.raises(DocumentIOError, match="not found"):
            read_document(tmp_path / "missing.yml")


class TestExportFilename:
    def test_Should_LowercaseSubject_When_DateGiven(self, valid_document):
        assert export_filename(valid_document, "06222023") == "06222023_beans_metadata.yml"

    def test_Should_UsePlaceholder_When_DateMissing(self, valid_document):
        assert export_filename(valid_document) == "{EXPERIMENT_DATE_in_format_mmddYYYY}_beans_metadata.yml"

    def test_Should_LeaveSubjectBlank_When_SubjectMissing(self):
        assert export_filename({}, "01012024") == "01012024__metadata.yml"


class TestExportDocument:
    """Export is gated on a clean validation."""

    def test_Should_WriteFile_When_DocumentValid(self, tmp_path: Path, valid_document):
        result = export_document(valid_document, tmp_path, experiment_date="06222023")

        assert result.success
        assert result.path == tmp_path / "06222023_beans_metadata.yml"
        assert read_document(result.path) == valid_document

    def test_Should_BlockExport_When_DocumentInvalid(self, tmp_path: Path, valid_document):
        valid_document["tasks"][0]["camera_id"] = [3]

        result = export_document(valid_document, tmp_path)

        assert not result.success
        assert [issue.code for issue in result.issues] == ["reference"]
        assert list(tmp_path.iterdir()) == []
