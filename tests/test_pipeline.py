"""Tests for batch extraction."""

import asyncio
from typing import Dict, Optional

from pom_scope.core.models import ExtractConfig, SkipReason
from pom_scope.core.pipeline import extract_all_package_files, extract_from_contents
from pom_scope.sources.local import LocalFileSource

from .conftest import make_pom


class DictSource:
    """In-memory content source recording the order of requests."""

    def __init__(self, files: Dict[str, str]) -> None:
        self.files = files
        self.requested = []

    async def get_file_content(self, path: str) -> Optional[str]:
        self.requested.append(path)
        await asyncio.sleep(0)
        return self.files.get(path)


class TestExtractFromContents:
    """Test extraction over already retrieved contents."""

    def test_bad_files_do_not_abort_the_batch(self, parent_pom, child_pom):
        """Test that missing and malformed files are excluded."""
        packages = extract_from_contents([
            ("parent/pom.xml", parent_pom),
            ("empty/pom.xml", None),
            ("broken/pom.xml", "<project"),
            ("other/pom.xml", "<project><artifactId>x</artifactId></project>"),
            ("child/pom.xml", child_pom),
        ])

        assert [pkg.file_id for pkg in packages] == ["parent/pom.xml", "child/pom.xml"]

    def test_results_are_sanitized(self, parent_pom, child_pom):
        packages = extract_from_contents([
            ("parent/pom.xml", parent_pom),
            ("child/pom.xml", child_pom),
        ])

        assert all(pkg.properties is None for pkg in packages)
        lib = packages[0].find_dependency("com.example:lib")
        assert lib.current_value == "2.0"
        assert lib.resolved_from is None

    def test_config_version_checker(self):
        config = ExtractConfig(version_checker=lambda value: value.startswith("1."))
        raw = make_pom(
            "  <dependencies>\n"
            "    <dependency><groupId>g</groupId><artifactId>a</artifactId><version>1.0</version></dependency>\n"
            "    <dependency><groupId>g</groupId><artifactId>b</artifactId><version>2.0</version></dependency>\n"
            "  </dependencies>\n"
        )
        pkg = extract_from_contents([("pom.xml", raw)], config)[0]

        assert pkg.find_dependency("g:a").skip_reason is None
        assert pkg.find_dependency("g:b").skip_reason == SkipReason.NOT_A_VERSION


class TestExtractAllPackageFiles:
    """Test retrieval plus extraction."""

    def test_in_memory_source(self, parent_pom, child_pom):
        source = DictSource({"parent/pom.xml": parent_pom, "child/pom.xml": child_pom})
        paths = ["child/pom.xml", "missing/pom.xml", "parent/pom.xml"]

        packages = asyncio.run(extract_all_package_files(None, paths, source))

        assert sorted(source.requested) == sorted(paths)
        assert [pkg.file_id for pkg in packages] == ["child/pom.xml", "parent/pom.xml"]
        child, parent = packages
        assert child.parent_file_id == "parent/pom.xml"
        # child comes first, so its re-homed dependency precedes the parent's own
        assert [dep.group_artifact for dep in parent.dependencies] == [
            "com.example:lib",
            "org.slf4j:slf4j-api",
        ]

    def test_local_source(self, maven_project):
        source = LocalFileSource(maven_project)
        config = ExtractConfig(max_concurrent=1)

        packages = asyncio.run(
            extract_all_package_files(config, ["parent/pom.xml", "child/pom.xml"], source)
        )

        parent = packages[0]
        lib = parent.find_dependency("com.example:lib")
        assert lib.current_value == "2.0"
        assert lib.source_position == 6
        assert lib.group_name == "lib.version"

    def test_failed_read_keeps_batch(self, parent_pom, child_pom):
        """Test that a source raising for one file leaves the others intact."""
        class FlakySource(DictSource):
            async def get_file_content(self, path: str) -> Optional[str]:
                if path == "child/pom.xml":
                    raise RuntimeError("connection reset")
                return await super().get_file_content(path)

        source = FlakySource({"parent/pom.xml": parent_pom, "child/pom.xml": child_pom})
        packages = asyncio.run(
            extract_all_package_files(None, ["parent/pom.xml", "child/pom.xml"], source)
        )

        assert [pkg.file_id for pkg in packages] == ["parent/pom.xml"]
        assert packages[0].find_dependency("org.slf4j:slf4j-api").current_value == "1.7.36"

    def test_empty_batch(self):
        assert asyncio.run(extract_all_package_files(None, [], DictSource({}))) == []
