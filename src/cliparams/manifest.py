"""XML manifest generation.

Renders the application metadata and every declared parameter into the
"executable" description that host applications read to build a GUI for
a command-line tool:

    <executable>
      <category>...</category>
      <title>...</title>
      <parameters>
        <label>Section</label>
        <description>Section - Section</description>
        <double>
          <name>Key</name>
          <default>0.5</default>
          <longflag>section-key</longflag>
          <constraints>
            <minimum>0.0</minimum>
            ...

The manifest only reads the registry.
"""

from typing import List
import xml.etree.ElementTree as ET

from .constants import TAG_ENUMERATION, XML_DECLARATION
from .metadata import AppMetadata
from .parameters.record import ParamRecord
from .parameters.registry import ParameterRegistry
from .utils.text import split_items


def build_parameter_element(key: str, record: ParamRecord) -> ET.Element:
    """Build the element describing one parameter.

    The element is named after the record's kind. Non-empty attributes
    become XML attributes; name, default (current value), tags and
    constraints become children.

    Args:
        key: Parameter key, used as <name>
        record: The parameter record

    Returns:
        The parameter element
    """
    attributes = {name: value for name, value in sorted(record.attributes.items()) if value}
    element = ET.Element(record.kind.value, attributes)
    ET.SubElement(element, "name").text = key
    ET.SubElement(element, "default").text = record.text

    for tag, value in sorted(record.tags.items()):
        if not value:
            continue
        if tag == TAG_ENUMERATION:
            items = split_items(value)
            if items:
                enumeration = ET.SubElement(element, TAG_ENUMERATION)
                for item in items:
                    ET.SubElement(enumeration, "element").text = item
        else:
            ET.SubElement(element, tag).text = value

    if record.constraints:
        constraints = ET.SubElement(element, "constraints")
        for name, value in record.constraints.items():
            ET.SubElement(constraints, name).text = value
    return element


def build_manifest(registry: ParameterRegistry, metadata: AppMetadata) -> ET.Element:
    """Build the <executable> element tree.

    Args:
        registry: Parameters to describe, grouped by section
        metadata: Application metadata

    Returns:
        Root element of the manifest
    """
    root = ET.Element("executable")
    for element, value in metadata.manifest_fields():
        ET.SubElement(root, element).text = value

    for section in registry.sections():
        group = ET.SubElement(root, "parameters")
        ET.SubElement(group, "label").text = section
        ET.SubElement(group, "description").text = f"{section} - Section"
        for key, record in registry.items(section):
            group.append(build_parameter_element(key, record))
    return root


def render_manifest(registry: ParameterRegistry, metadata: AppMetadata) -> str:
    """Render the manifest as indented XML text with declaration.

    Args:
        registry: Parameters to describe
        metadata: Application metadata

    Returns:
        XML document text ending with a newline
    """
    root = build_manifest(registry, metadata)
    ET.indent(root, space="  ")
    lines: List[str] = [XML_DECLARATION, ET.tostring(root, encoding="unicode")]
    return "\n".join(lines) + "\n"
