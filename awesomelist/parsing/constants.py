"""Constants for awesome-list section filtering and entry tagging."""

from __future__ import annotations

from typing import List, Tuple

EXCLUSION_PATTERNS: List[str] = [
    "Contents",
    "Table of Contents",
    "TOC",
    "Contributing",
    "License",
    "Awesome",
    "Badge",
]

KNOWN_SECTIONS: List[str] = [
    "Official Resources",
    "Alternative Implementations",
    "Themes",
    "Development Tools",
    "Related Projects",
    "Community Resources",
    "Documentation",
    "Tutorials",
    "Examples",
    "Libraries",
    "Plugins",
    "Extensions",
    "Integrations",
    "Testing",
    "Deployment",
    "Monitoring",
    "Security",
    "Performance",
    "Utilities",
    "Resources",
]

CATEGORY_INDICATORS: List[str] = [
    "tools",
    "libraries",
    "resources",
    "projects",
    "extensions",
    "plugins",
    "integrations",
    "frameworks",
    "platforms",
    "services",
    "utilities",
    "apps",
    "applications",
    "implementations",
    "solutions",
]

# Order matters: tags are emitted in table order. A bare "go" is left out because it
# matches far too many unrelated words.
TAG_INDICATORS: List[Tuple[str, str]] = [
    ("rust", "rust"),
    ("python", "python"),
    ("javascript", "javascript"),
    ("typescript", "typescript"),
    ("golang", "go"),
    ("java", "java"),
    ("c++", "cpp"),
    ("cli", "command-line"),
    ("web", "web"),
    ("api", "api"),
    ("tool", "tool"),
    ("library", "library"),
    ("framework", "framework"),
    ("plugin", "plugin"),
    ("extension", "extension"),
]

GITHUB_PREFIX = "https://github.com/"
GITHUB_EXCLUDED_PATHS: Tuple[str, ...] = ("/issues", "/wiki", "/releases")
