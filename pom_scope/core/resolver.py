"""Cross-file resolution of Maven properties along parent chains.

Every descriptor sees the properties of its whole parent chain, with
nearer declarations overriding farther ones. Versions that come from a
property are reported under the file that declares the property, since
that is where the text has to change.
"""

import re
from collections import ChainMap
from dataclasses import replace
from types import MappingProxyType
from typing import Callable, Dict, Hashable, List, Mapping, Optional, Sequence, TypeVar

from ..utils.logging import get_logger
from .extract import contains_placeholder
from .models import MavenDependency, MavenProperty, PomFile, SkipReason
from .versioning import is_valid_version

T = TypeVar("T", bound=Hashable)

PropertyScope = Mapping[str, MavenProperty]

_PLACEHOLDER = re.compile(r'\$\{(.*?)\}')
_WHOLE_PLACEHOLDER = re.compile(r'^\$\{(.*?)\}$')

logger = get_logger("pom_scope.resolver")


def walk_chain(start: T, next_of: Callable[[T], Optional[T]]) -> List[T]:
    """Follow a chain of links from ``start`` without revisiting a node.

    Args:
        start: First node of the chain
        next_of: Returns the next node, or None at the end of the chain

    Returns:
        Nodes in visiting order, starting with ``start``
    """
    chain = [start]
    visited = {start}
    current = next_of(start)
    while current is not None and current not in visited:
        visited.add(current)
        chain.append(current)
        current = next_of(current)
    return chain


def build_scope(chain: Sequence[PomFile]) -> PropertyScope:
    """Merge the properties of a parent chain into one read-only scope.

    Args:
        chain: Files ordered from the originating file up to the root-most ancestor

    Returns:
        Scope in which nearer declarations win
    """
    layers = [dict(pkg.properties or {}) for pkg in chain]
    return MappingProxyType(ChainMap(*layers))


def _lookup(scope: PropertyScope, placeholder_key: str) -> Optional[MavenProperty]:
    return scope.get(placeholder_key.strip())


def apply_props(
    dep: MavenDependency,
    scope: PropertyScope,
    version_checker: Callable[[str], bool] = is_valid_version
) -> MavenDependency:
    """Substitute property placeholders in a dependency and classify it.

    The name and registry URLs are substituted wherever a placeholder
    appears; the version only when the whole value is a single placeholder.

    Args:
        dep: Dependency as extracted
        scope: Properties visible to the declaring file
        version_checker: Predicate for valid versions

    Returns:
        Resolved copy of the dependency
    """
    def replace_all(value: str) -> str:
        def substitute(match: re.Match) -> str:
            prop = _lookup(scope, match.group(1))
            return prop.value if prop else match.group(0)
        return _PLACEHOLDER.sub(substitute, value)

    resolved = replace(
        dep,
        group_artifact=replace_all(dep.group_artifact),
        registry_urls=[replace_all(url) for url in dep.registry_urls],
        skip_reason=None,
    )

    match = _WHOLE_PLACEHOLDER.match(dep.current_value)
    if match:
        key = match.group(1).strip()
        prop = scope.get(key)
        if prop:
            resolved.current_value = prop.value
            resolved.group_name = key
            resolved.source_position = prop.source_position
            resolved.resolved_from = prop.owning_file

    if contains_placeholder(resolved.group_artifact):
        resolved.mark_skipped(SkipReason.NAME_PLACEHOLDER)
    elif contains_placeholder(resolved.current_value):
        resolved.mark_skipped(SkipReason.VERSION_PLACEHOLDER)
    elif not version_checker(resolved.current_value):
        resolved.mark_skipped(SkipReason.NOT_A_VERSION)

    return resolved


def resolve_parents(
    packages: Sequence[PomFile],
    version_checker: Callable[[str], bool] = is_valid_version
) -> List[PomFile]:
    """Resolve placeholders across a batch of descriptors.

    Args:
        packages: Every extracted file of the project
        version_checker: Predicate for valid versions

    Returns:
        Every input file object in input order, with resolved and re-homed
        dependencies; a repeated file id is only resolved the first time
    """
    by_name: Dict[Optional[str], PomFile] = {}
    for pkg in packages:
        if pkg.file_id in by_name:
            logger.warning(f"Duplicate package file {pkg.file_id}, resolving only the first one")
            continue
        by_name[pkg.file_id] = pkg

    def parent_of(name: Optional[str]) -> Optional[str]:
        pkg = by_name.get(name)
        if pkg is None or pkg.parent_file_id not in by_name:
            return None
        return pkg.parent_file_id

    # Property scopes and inherited registry URLs, per originating file
    scopes: Dict[Optional[str], PropertyScope] = {}
    registry_urls: Dict[Optional[str], Dict[str, None]] = {}
    for name in by_name:
        chain = [by_name[link] for link in walk_chain(name, parent_of)]
        scopes[name] = build_scope(chain)

        urls: Dict[str, None] = {}
        for pkg in chain:
            for dep in pkg.dependencies:
                urls.update(dict.fromkeys(dep.registry_urls))
        registry_urls[name] = urls

        if len(chain) > 1:
            logger.debug(f"{name}: parent chain {' -> '.join(str(p.file_id) for p in chain)}")

    for name, pkg in by_name.items():
        for dep in pkg.dependencies:
            dep.registry_urls = list(dict.fromkeys([*dep.registry_urls, *registry_urls[name]]))

    rehomed: Dict[Optional[str], List[MavenDependency]] = {name: [] for name in by_name}
    for name, pkg in by_name.items():
        for raw_dep in pkg.dependencies:
            dep = apply_props(raw_dep, scopes[name], version_checker)
            source = name
            if dep.resolved_from is not None and dep.resolved_from in rehomed:
                source = dep.resolved_from
            rehomed[source].append(dep)

    for name, pkg in by_name.items():
        pkg.dependencies = rehomed[name]

    return list(packages)


def clean_result(packages: Sequence[PomFile]) -> List[PomFile]:
    """Drop resolution-only bookkeeping from resolved files.

    Args:
        packages: Resolved files

    Returns:
        The same files without property tables or property sources
    """
    for pkg in packages:
        pkg.properties = None
        for dep in pkg.dependencies:
            dep.resolved_from = None
    return list(packages)
