from typing import List, Tuple

from core import log
from modules.static_analyzer.manifest_model import (
    COMPONENT_KINDS,
    ApplicationNode,
    ComponentKind,
    ComponentNode,
    ExportedState,
    ManifestNode,
)


def is_exported(component: ComponentNode) -> bool:
    """
    Decides whether a component is reachable from other applications.
    An explicit android:exported="false" always wins; "true" always exports;
    otherwise the component is exported only when it declares an intent-filter.
    """
    state = component.exported
    if state is ExportedState.FALSE:
        return False
    return state is ExportedState.TRUE or component.has_intent_filter


def _log_if_verbose(verbose: bool, message: str):
    if verbose:
        log.info(message)


def _log_component_found(kind: ComponentKind, component: ComponentNode):
    name = component.name or "unnamed"
    log.info(f"  {kind.icon} {kind.label}: {name}")


def _extract_kind(source: ApplicationNode, kind: ComponentKind, verbose: bool) -> List[ComponentNode]:
    found = []
    for component in source.components_of(kind):
        if is_exported(component):
            found.append(component)
            if verbose:
                _log_component_found(kind, component)
    return found


def extract(manifest: ManifestNode, verbose: bool = False) -> Tuple[ManifestNode, int]:
    """
    Builds a new manifest holding only the exported components.

    Manifest attributes, application attributes and every <permission> and
    <uses-permission> declaration are copied as they are. Returns the new
    manifest together with the number of exported components.
    """
    source = manifest.application
    application = ApplicationNode(attributes=dict(source.attributes))

    _log_if_verbose(verbose, "🔍 Searching for exported components...")

    for kind in COMPONENT_KINDS:
        application.components[kind] = _extract_kind(source, kind, verbose)
    total_found = application.component_count()

    _log_if_verbose(verbose, f"✅ Found {total_found} exported components")

    extracted = ManifestNode(
        attributes=dict(manifest.attributes),
        application=application,
        permissions=list(manifest.permissions),
        uses_permissions=list(manifest.uses_permissions),
    )
    return extracted, total_found
