"""Tag badge colours."""

from __future__ import annotations

from enum import Enum
from typing import Dict, Optional


class TagName(str, Enum):
    ARCHITECTURE = "architecture"
    BEST_PRACTICES = "best-practices"
    DEVOPS = "devops"
    FEATURE_FLAGS = "feature-flags"
    TYPESCRIPT = "typescript"
    REACT = "react"
    TESTING = "testing"
    PERFORMANCE = "performance"
    # development categories
    FRONTEND = "frontend"
    BACKEND = "backend"
    FULLSTACK = "fullstack"
    MOBILE = "mobile"
    # tools
    GIT = "git"
    AI = "ai"
    CURSOR = "cursor"
    TERMINAL = "terminal"
    OBSIDIAN = "obsidian"
    VSCODE = "vscode"
    DOCKER = "docker"
    KUBERNETES = "kubernetes"
    # practices
    MONITORING = "monitoring"
    WORKFLOW = "workflow"
    DOCUMENTATION = "documentation"
    ACCESSIBILITY = "accessibility"
    SECURITY = "security"
    # frameworks
    NEXTJS = "nextjs"
    ASTRO = "astro"
    TAILWIND = "tailwind"
    NODEJS = "nodejs"
    PYTHON = "python"
    # data
    GRAPHQL = "graphql"
    REDUX = "redux"
    DATABASE = "database"
    API = "api"
    # concepts
    PATTERNS = "patterns"
    ALGORITHMS = "algorithms"
    OPTIMIZATION = "optimization"
    DEBUGGING = "debugging"
    # web
    HTML = "html"
    CSS = "css"
    JAVASCRIPT = "javascript"
    WEBASSEMBLY = "webassembly"


def _palette(color: str) -> str:
    return f"bg-{color}-100 dark:bg-{color}-900/30 text-{color}-900 dark:text-{color}-100"


_TAG_PALETTE: Dict[TagName, str] = {
    TagName.ARCHITECTURE: "sky",
    TagName.BEST_PRACTICES: "violet",
    TagName.DEVOPS: "emerald",
    TagName.FEATURE_FLAGS: "amber",
    TagName.TYPESCRIPT: "blue",
    TagName.REACT: "cyan",
    TagName.TESTING: "rose",
    TagName.PERFORMANCE: "lime",
    TagName.FRONTEND: "pink",
    TagName.BACKEND: "indigo",
    TagName.FULLSTACK: "purple",
    TagName.MOBILE: "orange",
    TagName.GIT: "red",
    TagName.AI: "fuchsia",
    TagName.CURSOR: "teal",
    TagName.TERMINAL: "zinc",
    TagName.OBSIDIAN: "purple",
    TagName.VSCODE: "blue",
    TagName.DOCKER: "sky",
    TagName.KUBERNETES: "blue",
    TagName.MONITORING: "emerald",
    TagName.WORKFLOW: "amber",
    TagName.DOCUMENTATION: "slate",
    TagName.ACCESSIBILITY: "green",
    TagName.SECURITY: "red",
    TagName.NEXTJS: "zinc",
    TagName.ASTRO: "orange",
    TagName.TAILWIND: "cyan",
    TagName.NODEJS: "green",
    TagName.PYTHON: "yellow",
    TagName.GRAPHQL: "pink",
    TagName.REDUX: "purple",
    TagName.DATABASE: "blue",
    TagName.API: "indigo",
    TagName.PATTERNS: "violet",
    TagName.ALGORITHMS: "emerald",
    TagName.OPTIMIZATION: "amber",
    TagName.DEBUGGING: "rose",
    TagName.HTML: "orange",
    TagName.CSS: "blue",
    TagName.JAVASCRIPT: "yellow",
    TagName.WEBASSEMBLY: "purple",
}

TAG_COLORS: Dict[TagName, str] = {name: _palette(color) for name, color in _TAG_PALETTE.items()}
DEFAULT_TAG_COLOR = _palette("gray")


def parse_tag(tag: str) -> Optional[TagName]:
    try:
        return TagName(tag)
    except ValueError:
        return None


def get_tag_color(tag: str) -> str:
    name = parse_tag(tag)
    if name is None:
        return DEFAULT_TAG_COLOR
    return TAG_COLORS[name]
