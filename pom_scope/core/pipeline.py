"""Batch extraction over a set of descriptor paths."""

import asyncio
from typing import List, Optional, Sequence, Tuple

from ..sources.base import ContentSource
from ..utils.logging import get_logger
from .extract import extract_package
from .models import ExtractConfig, PomFile
from .resolver import clean_result, resolve_parents

logger = get_logger("pom_scope.pipeline")


def extract_from_contents(
    contents: Sequence[Tuple[str, Optional[str]]],
    config: Optional[ExtractConfig] = None
) -> List[PomFile]:
    """Extract and resolve descriptors whose text is already available.

    Args:
        contents: ``(file_id, text)`` pairs in project order; text may be None
        config: Extraction configuration

    Returns:
        Sanitized, resolved file results
    """
    config = config or ExtractConfig()

    packages: List[PomFile] = []
    for package_file, content in contents:
        if not content:
            logger.info(f"{package_file}: packageFile has no content")
            continue

        pkg = extract_package(content, package_file, config)
        if pkg:
            packages.append(pkg)
        else:
            logger.info(f"{package_file}: can not read dependencies")

    return clean_result(resolve_parents(packages, config.version_checker))


async def extract_all_package_files(
    config: Optional[ExtractConfig],
    package_files: Sequence[str],
    source: ContentSource
) -> List[PomFile]:
    """Retrieve, extract and resolve every descriptor of a project.

    Retrieval runs concurrently; resolution starts once every file is in.

    Args:
        config: Extraction configuration
        package_files: Descriptor paths, as understood by ``source``
        source: Content source the descriptors are read from

    Returns:
        Sanitized, resolved file results in input order
    """
    config = config or ExtractConfig()
    semaphore = asyncio.Semaphore(config.max_concurrent)

    async def fetch(package_file: str) -> Optional[str]:
        async with semaphore:
            return await source.get_file_content(package_file)

    results = await asyncio.gather(
        *(fetch(path) for path in package_files), return_exceptions=True
    )

    # A failed read leaves that file without content
    contents: List[Tuple[str, Optional[str]]] = []
    for package_file, result in zip(package_files, results):
        if isinstance(result, Exception):
            logger.error(f"{package_file}: read failed: {result}")
            result = None
        contents.append((package_file, result))

    return extract_from_contents(contents, config)
