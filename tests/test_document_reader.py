"""Tests for DocumentReader."""

import pytest

from rbxmx_repo.document_reader import DocumentReader, DocumentReadError
from tests.conftest import EMPTY_XML, ROOT_OPEN, SIMPLE_XML


class TestDocumentReader:
    """Tests for reading model documents."""

    def setup_method(self):
        self.reader = DocumentReader()

    def test_read_root_tag_and_attributes(self, tmp_xml):
        parsed = self.reader.read(tmp_xml(SIMPLE_XML))
        assert parsed.root_tag == 'roblox'
        assert parsed.root_attributes['version'] == '4'

    def test_read_collects_extras_in_order(self, tmp_xml):
        parsed = self.reader.read(tmp_xml(SIMPLE_XML))
        assert [e.tag for e in parsed.root_extras] == ['Meta', 'External', 'External']
        assert parsed.root_extras[0].get('name') == 'ExplicitAutoJoints'

    def test_read_single_item_is_list(self, tmp_xml):
        parsed = self.reader.read(tmp_xml(SIMPLE_XML))
        assert isinstance(parsed.root_items, list)
        assert len(parsed.root_items) == 1
        assert len(parsed.root_node.children) == 1

    def test_read_empty_document(self, tmp_xml):
        parsed = self.reader.read(tmp_xml(EMPTY_XML))
        assert parsed.root_items == []
        assert parsed.root_node.children == []

    def test_read_collects_namespaces(self, tmp_xml):
        parsed = self.reader.read(tmp_xml(SIMPLE_XML))
        assert ('xmime', 'http://www.w3.org/2005/05/xmlmime') in parsed.namespaces
        assert ('xsi', 'http://www.w3.org/2001/XMLSchema-instance') in parsed.namespaces

    def test_read_records_source_path(self, tmp_xml):
        path = tmp_xml(SIMPLE_XML)
        assert self.reader.read(path).source_path == path

    def test_read_missing_file_raises(self, tmp_path):
        with pytest.raises(DocumentReadError, match="not found"):
            self.reader.read(str(tmp_path / "missing.rbxmx"))

    def test_read_directory_raises(self, tmp_path):
        with pytest.raises(DocumentReadError):
            self.reader.read(str(tmp_path))

    def test_read_malformed_xml_raises(self, tmp_xml):
        with pytest.raises(DocumentReadError, match="Failed to parse"):
            self.reader.read(tmp_xml(ROOT_OPEN + "<Item class='Script'>"))

    def test_read_empty_file_raises(self, tmp_xml):
        with pytest.raises(DocumentReadError):
            self.reader.read(tmp_xml(""))
