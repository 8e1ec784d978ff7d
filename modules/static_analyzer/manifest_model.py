import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional

NAME_ATTR = "android:name"
EXPORTED_ATTR = "android:exported"
INTENT_FILTER_TAG = "intent-filter"


@dataclass(frozen=True)
class ComponentKind:
    tag: str
    icon: str

    @property
    def label(self) -> str:
        return self.tag.capitalize()


ACTIVITY = ComponentKind("activity", "📱")
SERVICE = ComponentKind("service", "🔧")
RECEIVER = ComponentKind("receiver", "📡")
PROVIDER = ComponentKind("provider", "🗄️")

# Output order of the component kinds, independent of source interleaving.
COMPONENT_KINDS = (ACTIVITY, SERVICE, RECEIVER, PROVIDER)


class ExportedState(Enum):
    TRUE = "true"
    FALSE = "false"
    UNSET = "unset"

    @classmethod
    def from_attribute(cls, value: Optional[str]) -> "ExportedState":
        # Exact match only: "True" or "1" are treated as unset.
        if value == "true":
            return cls.TRUE
        if value == "false":
            return cls.FALSE
        return cls.UNSET


@dataclass
class ComponentNode:
    kind: ComponentKind
    attributes: Dict[str, str] = field(default_factory=dict)
    children: List[ET.Element] = field(default_factory=list)
    text: Optional[str] = None

    @property
    def name(self) -> Optional[str]:
        return self.attributes.get(NAME_ATTR)

    @property
    def exported(self) -> ExportedState:
        return ExportedState.from_attribute(self.attributes.get(EXPORTED_ATTR))

    @property
    def intent_filters(self) -> List[ET.Element]:
        return [child for child in self.children if child.tag == INTENT_FILTER_TAG]

    @property
    def has_intent_filter(self) -> bool:
        return bool(self.intent_filters)


def _empty_components() -> Dict[ComponentKind, List[ComponentNode]]:
    return {kind: [] for kind in COMPONENT_KINDS}


@dataclass
class ApplicationNode:
    attributes: Dict[str, str] = field(default_factory=dict)
    components: Dict[ComponentKind, List[ComponentNode]] = field(default_factory=_empty_components)
    extras: List[ET.Element] = field(default_factory=list)

    def components_of(self, kind: ComponentKind) -> List[ComponentNode]:
        return self.components.get(kind, [])

    def component_count(self) -> int:
        return sum(len(self.components_of(kind)) for kind in COMPONENT_KINDS)


@dataclass
class ManifestNode:
    """In-memory form of an AndroidManifest.xml document.

    Attribute names keep their source prefixes (``android:name``,
    ``xmlns:android``). ``extras`` hold children that are neither components
    nor permission declarations; they survive a parse/serialize round trip
    but are not carried over by the export filter.
    """

    attributes: Dict[str, str] = field(default_factory=dict)
    application: ApplicationNode = field(default_factory=ApplicationNode)
    permissions: List[ET.Element] = field(default_factory=list)
    uses_permissions: List[ET.Element] = field(default_factory=list)
    extras: List[ET.Element] = field(default_factory=list)

    @property
    def package_name(self) -> str:
        return self.attributes.get("package", "")
