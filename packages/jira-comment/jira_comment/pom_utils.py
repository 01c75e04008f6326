"""Maven POM metadata for the comment header."""

import os
import xml.etree.ElementTree as ET
from typing import Optional

from toolkit_utils import convert_exception

from .constants import POM_FILENAME, POM_NAMESPACE
from .errors import MissingProjectFieldError, NotAMavenProjectError, PomParseError
from .models import ProjectInfo


def _find(el, tag, ns=POM_NAMESPACE):
    """Find a direct child element, with or without the Maven namespace."""
    result = el.find(f"m:{tag}", ns)
    if result is not None:
        return result
    return el.find(tag)


def _text(el, tag, ns=POM_NAMESPACE) -> Optional[str]:
    """Stripped text of a direct child element, None when absent or empty."""
    if el is None:
        return None
    child = _find(el, tag, ns)
    if child is not None and child.text and child.text.strip():
        return child.text.strip()
    return None


@convert_exception(ET.ParseError, PomParseError, "Could not parse the POM")
def _parse(pom_path: str) -> ET.Element:
    return ET.parse(pom_path).getroot()


def resolve_scm_url(root: ET.Element) -> Optional[str]:
    """<scm><url> if set, else <scm><connection>."""
    scm = _find(root, "scm")
    return _text(scm, "url") or _text(scm, "connection")


def read_pom(pom_path: str):
    """Read name, version and SCM url from a POM.

    Returns:
        tuple: (name, version, scm_url)

    Raises:
        PomParseError: If the file is not well-formed XML
        MissingProjectFieldError: For the first of version, name, scm url missing
    """
    root = _parse(pom_path)

    version = _text(root, "version")
    if not version:
        raise MissingProjectFieldError("version", pom_path)

    name = _text(root, "name")
    if not name:
        raise MissingProjectFieldError("name", pom_path)

    scm_url = resolve_scm_url(root)
    if not scm_url:
        raise MissingProjectFieldError("scm_url", pom_path)

    return name, version, scm_url


def read_project_info(root_dir: str, git_dir: str) -> ProjectInfo:
    """Build the ProjectInfo for the repository at root_dir.

    Raises:
        NotAMavenProjectError: If root_dir holds no pom.xml
    """
    pom_path = os.path.join(root_dir, POM_FILENAME)
    if not os.path.isfile(pom_path):
        raise NotAMavenProjectError(f"No {POM_FILENAME} found in {root_dir}")

    name, version, scm_url = read_pom(pom_path)
    return ProjectInfo(
        name=name,
        version=version,
        scm_url=scm_url,
        pom_path=pom_path,
        root_dir=root_dir,
        git_dir=git_dir,
    )
