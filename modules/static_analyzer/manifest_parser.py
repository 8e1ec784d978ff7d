import copy
import xml.etree.ElementTree as ET
from xml.parsers import expat

from core.logger import log
from core.exceptions import ManifestParseError, ManifestSchemaError
from modules.static_analyzer.manifest_model import (
    COMPONENT_KINDS,
    ApplicationNode,
    ComponentNode,
    ManifestNode,
)

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'

MANIFEST_TAG = "manifest"
APPLICATION_TAG = "application"
PERMISSION_TAG = "permission"
USES_PERMISSION_TAG = "uses-permission"

_KINDS_BY_TAG = {kind.tag: kind for kind in COMPONENT_KINDS}


def _read_tree(text: str) -> ET.Element:
    """
    Parses the text without namespace processing, so "android:name" and
    "xmlns:android" come through as plain attribute names.
    """
    builder = ET.TreeBuilder()
    parser = expat.ParserCreate()
    parser.StartElementHandler = builder.start
    parser.EndElementHandler = builder.end
    parser.CharacterDataHandler = builder.data
    try:
        parser.Parse(text, True)
    except expat.ExpatError as e:
        log.error(f"Error parsing AndroidManifest.xml: {e}")
        raise ManifestParseError(f"Invalid XML: {e}") from e
    return builder.close()


def _element_text(element: ET.Element):
    if element.text and element.text.strip():
        return element.text
    return None


def _build_application(element: ET.Element) -> ApplicationNode:
    application = ApplicationNode(attributes=dict(element.attrib))
    for child in element:
        kind = _KINDS_BY_TAG.get(child.tag)
        if kind is None:
            application.extras.append(child)
            continue
        application.components[kind].append(
            ComponentNode(
                kind=kind,
                attributes=dict(child.attrib),
                children=list(child),
                text=_element_text(child),
            )
        )
    return application


def parse(text: str) -> ManifestNode:
    """
    Parses AndroidManifest.xml text into a ManifestNode.
    Every repeatable element ends up in a list, even when it occurs once.
    """
    root = _read_tree(text)

    if root.tag != MANIFEST_TAG:
        log.error(f"Unexpected root element <{root.tag}> in AndroidManifest.xml")
        raise ManifestSchemaError("Invalid AndroidManifest.xml file - no manifest root element found")

    manifest = ManifestNode(attributes=dict(root.attrib))

    application_seen = False
    for child in root:
        if child.tag == APPLICATION_TAG and not application_seen:
            manifest.application = _build_application(child)
            application_seen = True
        elif child.tag == PERMISSION_TAG:
            manifest.permissions.append(child)
        elif child.tag == USES_PERMISSION_TAG:
            manifest.uses_permissions.append(child)
        else:
            manifest.extras.append(child)
    return manifest


def serialize(manifest: ManifestNode, indent: str = "  ") -> str:
    """Renders a ManifestNode as XML text. The node itself is left untouched."""
    root = ET.Element(MANIFEST_TAG, dict(manifest.attributes))

    application = ET.SubElement(root, APPLICATION_TAG, dict(manifest.application.attributes))
    for kind in COMPONENT_KINDS:
        for component in manifest.application.components_of(kind):
            element = ET.SubElement(application, kind.tag, dict(component.attributes))
            element.text = component.text
            element.extend(copy.deepcopy(component.children))
    application.extend(copy.deepcopy(manifest.application.extras))

    for declaration in manifest.permissions + manifest.uses_permissions + manifest.extras:
        root.append(copy.deepcopy(declaration))

    ET.indent(root, space=indent)
    return f"{XML_DECLARATION}\n{ET.tostring(root, encoding='unicode')}\n"


class ManifestParser:
    def __init__(self, manifest_path: str):
        self.manifest_path = manifest_path
        self.manifest = self._load_manifest()
        self.package_name = self.manifest.package_name

    def _load_manifest(self) -> ManifestNode:
        try:
            with open(self.manifest_path, "r", encoding="utf-8") as f:
                content = f.read()
        except FileNotFoundError:
            log.error(f"AndroidManifest.xml not found at: {self.manifest_path}")
            raise
        return parse(content)
