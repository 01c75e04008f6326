"""
Constants used throughout the jira-comment package.
Configuration values live in the config module.
"""

PROG_NAME = "jirac"

POM_FILENAME = "pom.xml"

# * XML namespace used by Maven POM files (POM model version 4.0.0)
POM_NAMESPACE = {"m": "http://maven.apache.org/POM/4.0.0"}

# * Clipboard tools per platform family
CLIPBOARD_COMMANDS = {
    "darwin": ["pbcopy"],
    "windows": ["clip"],
    "linux": ["xclip", "-selection", "clipboard"],
}

INSTALL_HINTS = {
    "pbcopy": "pbcopy ships with macOS; check your PATH",
    "clip": "clip.exe ships with Windows; check your PATH",
    "xclip": "Install with your package manager (e.g., sudo apt-get install xclip)",
    "git": "See https://git-scm.com/downloads",
}

# * Interactive selection file
SELECTION_MARKER = "x "
SELECTION_HEADER = (
    "# Mark the commits to include by starting their line with 'x ' (x and a"
    " space), then save and close the editor."
)
DEFAULT_RECENT_COMMITS = 10

# * Description override answers
OVERRIDE_CUSTOM_ANSWERS = ("Y", "y")
OVERRIDE_SKIP_ANSWERS = ("S", "s")

# * Built-in Jira markup for the comment header
DEFAULT_HEADER_TEMPLATE = """*Project:* {{name}}
*Version:* {{version}}
*Branch:* {{branch}}
*SCM:* {{scm_url}}
*Commits:*"""

DESCRIPTION_HEADING = "*Description:*"
