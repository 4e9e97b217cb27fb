# ruff: noqa: E501
"""Skeleton files rendered onto the test host."""

from collections.abc import Mapping
from string import Template
from typing import Any

SETTINGS_XML = """\
<?xml version="1.0" encoding="UTF-8"?>
<settings xmlns="http://maven.apache.org/SETTINGS/1.0.0"
          xmlns:xsi="http://www.w3.org/2001/XMLSchema-instance"
          xsi:schemaLocation="http://maven.apache.org/SETTINGS/1.0.0 http://maven.apache.org/xsd/settings-1.0.0.xsd">
  <profiles>
    <profile>
      <id>voras</id>
      <activation>
        <activeByDefault>true</activeByDefault>
      </activation>
      <repositories>
        <repository>
          <id>voras.repo</id>
          <url>$vorasrepo</url>
          <releases><enabled>true</enabled></releases>
          <snapshots><enabled>true</enabled></snapshots>
        </repository>
      </repositories>
      <pluginRepositories>
        <pluginRepository>
          <id>voras.repo</id>
          <url>$vorasrepo</url>
        </pluginRepository>
      </pluginRepositories>
    </profile>
  </profiles>
</settings>
"""

SKELETONS: dict[str, str] = {
    "settings.xml": SETTINGS_XML,
}


def render_skeleton(name: str, parameters: Mapping[str, Any]) -> str:
    """Render a bundled skeleton, substituting ``$name`` placeholders.

    Args:
        name: Skeleton file name
        parameters: Placeholder values

    Returns:
        Rendered file content

    Raises:
        KeyError: If the skeleton is unknown or a placeholder has no value
    """
    try:
        skeleton = SKELETONS[name]
    except KeyError:
        raise KeyError(f"Unknown skeleton: {name}") from None
    return Template(skeleton).substitute(parameters)
