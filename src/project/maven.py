"""Maven project scanning for the compiler target version."""
import logging
import re
import xml.etree.ElementTree as ET
from typing import Dict, Optional

from constants import Constants

from .errors import ProjectConfigError

_PROPERTY_KEYS = ("maven.compiler.release", "maven.compiler.target", "maven.compiler.source")
_PLUGIN_KEYS = ("release", "target", "source")
_PROPERTY_REF = re.compile(r"\$\{([^}]+)\}")


def _ns(root: ET.Element) -> str:
    """Return the namespace prefix used by the POM, or an empty string."""
    if root.tag.startswith(Constants.POM_NAMESPACE):
        return Constants.POM_NAMESPACE
    return ""


def _text(node: Optional[ET.Element]) -> Optional[str]:
    if node is None or node.text is None:
        return None
    text = node.text.strip()
    return text or None


def _read_properties(pom: ET.Element, ns: str) -> Dict[str, str]:
    props: Dict[str, str] = {}
    properties = pom.find(f"{ns}properties")
    if properties is None:
        return props
    for prop in properties:
        value = _text(prop)
        if value is not None:
            props[prop.tag[len(ns):]] = value
    return props


def _interpolate(value: str, props: Dict[str, str]) -> Optional[str]:
    """Resolve ``${name}`` references against the POM properties.

    Returns None when a reference cannot be resolved.
    """
    seen = set()
    while True:
        m = _PROPERTY_REF.search(value)
        if not m:
            return value
        name = m.group(1)
        if name in seen or name not in props:
            logging.debug("Unresolved POM property reference: %s", name)
            return None
        seen.add(name)
        value = value[:m.start()] + props[name] + value[m.end():]


def _compiler_plugin_value(pom: ET.Element, ns: str) -> Optional[str]:
    for plugin in pom.iter(f"{ns}plugin"):
        if _text(plugin.find(f"{ns}artifactId")) != "maven-compiler-plugin":
            continue
        configuration = plugin.find(f"{ns}configuration")
        if configuration is None:
            continue
        for key in _PLUGIN_KEYS:
            value = _text(configuration.find(f"{ns}{key}"))
            if value is not None:
                return value
    return None


def read_target_compatibility(pom_path) -> Optional[str]:
    """Read the Java target version declared by a pom.xml.

    Properties ``maven.compiler.release``, ``maven.compiler.target`` and
    ``maven.compiler.source`` are checked first, then the
    maven-compiler-plugin configuration.

    Args:
        pom_path (str | Path): Path to the pom.xml file.

    Returns:
        str: Raw version string, or None if the POM declares none.

    Raises:
        ProjectConfigError: If the file cannot be read or parsed.
    """
    try:
        pom = ET.parse(pom_path).getroot()
    except (OSError, ET.ParseError) as e:
        raise ProjectConfigError(f"Couldn't read {pom_path}: {e}") from e

    ns = _ns(pom)
    props = _read_properties(pom, ns)

    candidates = [props.get(key) for key in _PROPERTY_KEYS]
    candidates.append(_compiler_plugin_value(pom, ns))
    for raw in candidates:
        if raw is None:
            continue
        value = _interpolate(raw, props)
        if value is not None:
            logging.debug("Found Java target %s in %s", value, pom_path)
            return value
    return None
