"""Single-file extraction of dependencies from Maven pom.xml descriptors."""

import posixpath
import re
from typing import Dict, List, Optional

from lxml import etree

from ..utils.logging import get_logger
from .models import DEFAULT_MAVEN_REPO, ExtractConfig, MavenDependency, MavenProperty, PomFile
from .xml_tree import XmlNode, parse_xml

POM_NAMESPACE = "http://maven.apache.org/POM/4.0.0"
DEFAULT_PARENT_PATH = "../pom.xml"

_PLACEHOLDER = re.compile(r'\$\{.*?\}')

logger = get_logger("pom_scope.extract")


def contains_placeholder(value: str) -> bool:
    """Check whether a string still contains a ``${...}`` placeholder."""
    return bool(_PLACEHOLDER.search(value))


def parse_pom(raw: str) -> Optional[XmlNode]:
    """Parse and validate a Maven descriptor.

    Args:
        raw: Descriptor text

    Returns:
        Root ``project`` node, or None if the text is not a POM 4.0.0 descriptor
    """
    try:
        project = parse_xml(raw)
    except (etree.XMLSyntaxError, ValueError):
        return None

    if project.name != "project" or project.prefix is not None:
        return None
    if project.default_namespace != POM_NAMESPACE:
        return None
    return project


def is_dependency_node(node: XmlNode) -> bool:
    """A node declares a dependency if it has groupId, artifactId and version values."""
    return all(node.value_with_path(key) for key in ("groupId", "artifactId", "version"))


def dependency_from_node(
    node: XmlNode,
    registry_url: str = DEFAULT_MAVEN_REPO
) -> Optional[MavenDependency]:
    """Build a dependency from a dependency-shaped node.

    Args:
        node: Candidate node
        registry_url: Registry URL every dependency starts with

    Returns:
        Dependency or None if the node lacks a required field
    """
    if not is_dependency_node(node):
        return None

    group_id = node.value_with_path("groupId")
    artifact_id = node.value_with_path("artifactId")
    version_node = node.descendant_with_path("version")

    return MavenDependency(
        group_artifact=f"{group_id}:{artifact_id}",
        current_value=version_node.value,
        source_position=version_node.position,
        registry_urls=[registry_url],
    )


def deep_extract(root: XmlNode, registry_url: str = DEFAULT_MAVEN_REPO) -> List[MavenDependency]:
    """Find every dependency declared anywhere below ``root``.

    The root itself is never reported, even if it has the shape of a
    dependency (a project's own coordinates).

    Args:
        root: Document root
        registry_url: Default registry URL for new dependencies

    Returns:
        Dependencies in document order
    """
    candidates = [node for node in root.iter_descendants() if node != root]

    dependencies = []
    for node in candidates:
        dependency = dependency_from_node(node, registry_url)
        if dependency:
            dependencies.append(dependency)
    return dependencies


def extract_properties(project: XmlNode, file_id: Optional[str] = None) -> Dict[str, MavenProperty]:
    """Collect the <properties> declared directly in a descriptor.

    Args:
        project: Document root
        file_id: Identifier of the declaring file

    Returns:
        Mapping of property name to entry
    """
    props: Dict[str, MavenProperty] = {}
    props_node = project.child_named("properties")
    if props_node is None:
        return props

    for prop_node in props_node.children:
        key = prop_node.name
        value = prop_node.value
        if key and value:
            props[key] = MavenProperty(
                value=value,
                source_position=prop_node.position,
                owning_file=file_id,
            )
    return props


def extract_repository_urls(project: XmlNode) -> List[str]:
    """URLs of the <repositories> declared in a descriptor, in order."""
    repositories = project.child_named("repositories")
    if repositories is None:
        return []

    urls = []
    for repo in repositories.children_named("repository"):
        url = repo.value_with_path("url")
        if url:
            urls.append(url)
    return urls


def resolve_parent_file(package_file: str, parent_path: str) -> str:
    """Compute the identifier of a parent descriptor.

    A ``relativePath`` naming a file (``pom.xml`` or ``*.pom.xml``) is kept
    as is; anything else is treated as a directory holding ``pom.xml``.

    Args:
        package_file: Identifier of the child descriptor
        parent_path: The child's ``parent/relativePath`` value

    Returns:
        Normalized path of the parent descriptor
    """
    parent_file = "pom.xml"
    parent_dir = parent_path
    parent_basename = posixpath.basename(parent_path)
    if parent_basename == "pom.xml" or parent_basename.endswith(".pom.xml"):
        parent_file = parent_basename
        parent_dir = posixpath.dirname(parent_path)

    directory = posixpath.dirname(package_file)
    return posixpath.normpath(posixpath.join(directory, parent_dir, parent_file))


def extract_package(
    raw_content: str,
    package_file: Optional[str] = None,
    config: Optional[ExtractConfig] = None
) -> Optional[PomFile]:
    """Extract dependencies, properties and parent link from one descriptor.

    Args:
        raw_content: Descriptor text
        package_file: Identifier of the descriptor; without it no parent link is computed
        config: Extraction configuration

    Returns:
        Per-file result or None if the text is not a valid descriptor
    """
    if not raw_content:
        return None

    project = parse_pom(raw_content)
    if project is None:
        return None

    config = config or ExtractConfig()

    result = PomFile(file_id=package_file)
    result.dependencies = deep_extract(project, config.default_registry_url)
    result.properties = extract_properties(project, package_file)

    # Declared repositories are offered to every dependency of this file
    repo_urls = extract_repository_urls(project)
    result.declared_repository_urls = repo_urls
    for dep in result.dependencies:
        dep.registry_urls.extend(repo_urls)

    if package_file and project.child_named("parent") is not None:
        parent_path = project.value_with_path("parent.relativePath") or DEFAULT_PARENT_PATH
        result.parent_file_id = resolve_parent_file(package_file, parent_path)

    logger.debug(
        f"{package_file or '<pom>'}: {len(result.dependencies)} dependencies, "
        f"{len(result.properties)} properties"
    )
    return result
