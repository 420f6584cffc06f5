"""Shared fixtures for PomScope tests."""

import pytest

POM_NS = "http://maven.apache.org/POM/4.0.0"


def make_pom(body: str) -> str:
    """Wrap a body in a POM 4.0.0 project element; the body starts on line 2."""
    return f'<project xmlns="{POM_NS}">\n{body}</project>\n'


@pytest.fixture
def parent_pom() -> str:
    return make_pom(
        "  <groupId>org.example</groupId>\n"
        "  <artifactId>parent</artifactId>\n"
        "  <version>1.0.0</version>\n"
        "  <properties>\n"
        "    <lib.version>2.0</lib.version>\n"
        "    <slf4j.version>1.7.36</slf4j.version>\n"
        "  </properties>\n"
        "  <repositories>\n"
        "    <repository>\n"
        "      <id>internal</id>\n"
        "      <url>https://repo.example.org/maven</url>\n"
        "    </repository>\n"
        "  </repositories>\n"
        "  <dependencies>\n"
        "    <dependency>\n"
        "      <groupId>org.slf4j</groupId>\n"
        "      <artifactId>slf4j-api</artifactId>\n"
        "      <version>${slf4j.version}</version>\n"
        "    </dependency>\n"
        "  </dependencies>\n"
    )


@pytest.fixture
def child_pom() -> str:
    return make_pom(
        "  <parent>\n"
        "    <groupId>org.example</groupId>\n"
        "    <artifactId>parent</artifactId>\n"
        "    <version>1.0.0</version>\n"
        "    <relativePath>../parent/pom.xml</relativePath>\n"
        "  </parent>\n"
        "  <artifactId>child</artifactId>\n"
        "  <dependencies>\n"
        "    <dependency>\n"
        "      <groupId>com.example</groupId>\n"
        "      <artifactId>lib</artifactId>\n"
        "      <version>${lib.version}</version>\n"
        "    </dependency>\n"
        "    <dependency>\n"
        "      <groupId>junit</groupId>\n"
        "      <artifactId>junit</artifactId>\n"
        "      <version>4.13.2</version>\n"
        "    </dependency>\n"
        "  </dependencies>\n"
    )


@pytest.fixture
def maven_project(tmp_path, parent_pom, child_pom):
    """A two-module project on disk: parent/pom.xml and child/pom.xml."""
    (tmp_path / "parent").mkdir()
    (tmp_path / "child").mkdir()
    (tmp_path / "parent" / "pom.xml").write_text(parent_pom)
    (tmp_path / "child" / "pom.xml").write_text(child_pom)
    return tmp_path
