"""Typed access to an Item's <Properties> block.

Each child of <Properties> is one property: the tag is its declared type and
the ``name`` attribute its property name:

  <Properties>
    <string name="Name">Main</string>
    <bool name="Disabled">false</bool>
    <ProtectedString name="Source"><![CDATA[print('a')]]></ProtectedString>
  </Properties>
"""

import xml.etree.ElementTree as ET


class PropertyBag:
    """Looks up properties by name, optionally restricted to one type tag.

    Lookups return None when no property matches, so callers can tell an
    absent property from an empty one and supply their own default.
    """

    def __init__(self, properties: ET.Element | None):
        self._entries: list[ET.Element] = list(properties) if properties is not None else []

    @classmethod
    def from_item(cls, item: ET.Element) -> 'PropertyBag':
        return cls(item.find('Properties'))

    def get_string(self, name: str, type_tag: str | None = None) -> str | None:
        """Return the text of the first property called ``name``.

        Args:
            name: Value of the property's ``name`` attribute.
            type_tag: When given, only properties declared with this tag match.

        Returns:
            The property text ('' for an empty element), or None if absent.
        """
        for entry in self._entries:
            if type_tag is not None and entry.tag != type_tag:
                continue
            if entry.get('name') == name:
                return entry.text or ''
        return None

    def get_bool(self, name: str) -> bool:
        """True only when the property text is exactly 'true'."""
        return self.get_string(name) == 'true'
