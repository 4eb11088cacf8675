"""Shared test fixtures."""

import pytest

from rbxmx_repo.document_reader import DocumentReader


# ── Sample XML Content ───────────────────────────────────────────────────

ROOT_OPEN = (
    '<roblox xmlns:xmime="http://www.w3.org/2005/05/xmlmime" '
    'xmlns:xsi="http://www.w3.org/2001/XMLSchema-instance" '
    'xsi:noNamespaceSchemaLocation="http://www.roblox.com/roblox.xsd" version="4">'
)

SIMPLE_XML = ROOT_OPEN + """
  <Meta name="ExplicitAutoJoints">true</Meta>
  <External>null</External>
  <External>nil</External>
  <Item class="ServerScriptService" referent="RBX1">
    <Properties>
      <string name="Name">ServerScriptService</string>
    </Properties>
    <Item class="Script" referent="RBX2">
      <Properties>
        <bool name="Disabled">false</bool>
        <string name="Name">Main</string>
        <ProtectedString name="Source"><![CDATA[print('a')]]></ProtectedString>
      </Properties>
    </Item>
  </Item>
</roblox>
"""

PLACE_XML = ROOT_OPEN + """
  <Meta name="ExplicitAutoJoints">true</Meta>
  <External>null</External>
  <Item class="ServerScriptService" referent="RBX1">
    <Properties><string name="Name">ServerScriptService</string></Properties>
    <Item class="Script" referent="RBX2">
      <Properties>
        <bool name="Disabled">false</bool>
        <string name="Name">Main</string>
        <ProtectedString name="Source"><![CDATA[print('a')]]></ProtectedString>
      </Properties>
    </Item>
  </Item>
  <Item class="ReplicatedStorage" referent="RBX3">
    <Properties><string name="Name">ReplicatedStorage</string></Properties>
    <Item class="ModuleScript" referent="RBX4">
      <Properties>
        <string name="Name">Util</string>
        <ProtectedString name="Source"><![CDATA[return {}
]]></ProtectedString>
      </Properties>
      <Item class="Script" referent="RBX5">
        <Properties>
          <bool name="Disabled">true</bool>
          <string name="Name">Init</string>
          <ProtectedString name="Source"><![CDATA[print('init')]]></ProtectedString>
        </Properties>
      </Item>
    </Item>
  </Item>
  <Item class="Workspace" referent="RBX6">
    <Properties><string name="Name">Workspace</string></Properties>
    <Item class="Folder" referent="RBX7">
      <Properties><string name="Name">Data</string></Properties>
    </Item>
    <Item class="Folder" referent="RBX8">
      <Properties><string name="Name">Data</string></Properties>
      <Item class="LocalScript" referent="RBX9">
        <Properties>
          <bool name="Disabled">1</bool>
          <string name="Name">Client:Main</string>
          <ProtectedString name="Source"><![CDATA[local x = 1]]></ProtectedString>
        </Properties>
      </Item>
    </Item>
    <Item class="Model" referent="RBX10">
      <Properties><string name="Name">Car</string></Properties>
      <Item class="Part" referent="RBX11">
        <Properties><string name="Name">Wheel</string></Properties>
      </Item>
    </Item>
    <Item class="Script" referent="RBX12">
      <Properties>
        <string name="Name">WorkspaceScript</string>
        <ProtectedString name="Source"><![CDATA[print('ws')]]></ProtectedString>
      </Properties>
    </Item>
  </Item>
  <Item class="Folder" referent="RBX13">
    <Properties><string name="Name">MyTools</string></Properties>
    <Item class="ModuleScript" referent="RBX14">
      <Properties>
        <string name="Name">Helper</string>
        <ProtectedString name="Source"><![CDATA[return 42]]></ProtectedString>
      </Properties>
    </Item>
  </Item>
</roblox>
"""

EMPTY_XML = ROOT_OPEN + "</roblox>"


# ── Fixtures ─────────────────────────────────────────────────────────────

@pytest.fixture
def tmp_xml(tmp_path):
    """Write XML content to a temp file and return its path."""
    def _write(content: str, filename: str = "test.rbxmx") -> str:
        path = tmp_path / filename
        path.write_text(content, encoding="utf-8")
        return str(path)
    return _write


@pytest.fixture
def parse_xml(tmp_xml):
    """Write XML content to a temp file and parse it."""
    def _parse(content: str):
        return DocumentReader().read(tmp_xml(content))
    return _parse


@pytest.fixture
def simple_doc(parse_xml):
    return parse_xml(SIMPLE_XML)


@pytest.fixture
def place_doc(parse_xml):
    return parse_xml(PLACE_XML)
