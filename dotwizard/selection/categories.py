"""Two-level drill-down over AI framework module categories.

Selections live in an external ``dict[category_id, list[bool]]`` that starts
empty; a category's list is created the first time it is entered. Sub-group
headers are derived from the ``"Prefix: "`` part of item labels on every call.
"""

from __future__ import annotations

from dataclasses import dataclass

from .model import SEPARATOR_ENTRY, Entry, EntryKind, GroupRange, SelectionList

BACK_LABEL = "← Back"
GROUP_HEADER_FORMAT = "📂 {title} ({selected}/{total})"
UNGROUPED_TITLE = "Other"

CategorySelection = dict[str, list[bool]]


@dataclass(frozen=True)
class ModuleItem:
    id: str
    label: str


@dataclass(frozen=True)
class ModuleCategory:
    id: str
    label: str
    icon: str
    items: tuple[ModuleItem, ...]

    def option_label(self, selection: CategorySelection | None) -> str:
        """Menu row such as ``🪝 Hooks (2/10 selected)``."""
        flags = (selection or {}).get(self.id, [])
        chosen = sum(1 for flag in flags if flag)
        return f"{self.icon} {self.label} ({chosen}/{len(self.items)} selected)"


def _items(*pairs: tuple[str, str]) -> tuple[ModuleItem, ...]:
    return tuple(ModuleItem(item_id, label) for item_id, label in pairs)


MODULE_CATEGORIES: tuple[ModuleCategory, ...] = (
    ModuleCategory(
        "hooks",
        "Hooks",
        "🪝",
        _items(
            ("block-dangerous-commands", "Block Dangerous Commands"),
            ("commit-guard", "Commit Guard"),
            ("context-loader", "Context Loader"),
            ("improve-prompt", "Improve Prompt"),
            ("learning-log", "Learning Log"),
            ("model-router", "Model Router"),
            ("secret-scanner", "Secret Scanner"),
            ("skill-validator", "Skill Validator"),
            ("task-artifact", "Task Artifact"),
            ("validate-workflow", "Validate Workflow"),
        ),
    ),
    ModuleCategory(
        "commands",
        "Commands",
        "⚡",
        _items(
            ("git:changelog", "Git: Changelog"),
            ("git:ci-local", "Git: CI Local"),
            ("git:commit", "Git: Commit"),
            ("git:fix-issue", "Git: Fix Issue"),
            ("git:pr-create", "Git: PR Create"),
            ("git:pr-review", "Git: PR Review"),
            ("git:worktree", "Git: Worktree"),
            ("refactoring:cleanup", "Refactoring: Cleanup"),
            ("refactoring:dead-code", "Refactoring: Dead Code"),
            ("refactoring:extract", "Refactoring: Extract"),
            ("testing:e2e", "Testing: E2E"),
            ("testing:tdd", "Testing: TDD"),
            ("testing:test-coverage", "Testing: Coverage"),
            ("testing:test-fix", "Testing: Fix Tests"),
            ("workflow:generate-agents-md", "Workflow: Generate Agents"),
            ("workflow:planning", "Workflow: Planning"),
        ),
    ),
    ModuleCategory(
        "agents",
        "Agents",
        "🤖",
        _items(
            ("orchestrator", "General: Orchestrator"),
            ("business-api-designer", "Business: API Designer"),
            ("business-product-strategist", "Business: Product Strategist"),
            ("business-technical-writer", "Business: Technical Writer"),
            ("data-ai-ai-engineer", "Data & AI: AI Engineer"),
            ("data-ai-data-engineer", "Data & AI: Data Engineer"),
            ("data-ai-prompt-engineer", "Data & AI: Prompt Engineer"),
            ("development-backend-architect", "Development: Backend Architect"),
            ("development-golang-pro", "Development: Go Pro"),
            ("development-python-pro", "Development: Python Pro"),
            ("development-react-pro", "Development: React Pro"),
            ("development-typescript-pro", "Development: TypeScript Pro"),
            ("infrastructure-devops-engineer", "Infrastructure: DevOps Engineer"),
            ("infrastructure-kubernetes-expert", "Infrastructure: Kubernetes Expert"),
            ("quality-code-reviewer", "Quality: Code Reviewer"),
            ("quality-security-auditor", "Quality: Security Auditor"),
            ("quality-test-engineer", "Quality: Test Engineer"),
        ),
    ),
    ModuleCategory(
        "skills",
        "Skills",
        "🎯",
        _items(
            ("backend-api-gateway", "Backend: API Gateway"),
            ("backend-fastapi", "Backend: FastAPI"),
            ("backend-go-backend", "Backend: Go Backend"),
            ("backend-jwt-auth", "Backend: JWT Auth"),
            ("data-ai-langchain", "Data & AI: LangChain"),
            ("data-ai-pytorch", "Data & AI: PyTorch"),
            ("database-pgx-postgres", "Database: PGX Postgres"),
            ("database-redis-cache", "Database: Redis Cache"),
            ("frontend-tanstack-query", "Frontend: TanStack Query"),
            ("frontend-zod-validation", "Frontend: Zod Validation"),
            ("infra-docker-containers", "Infrastructure: Docker"),
            ("infra-kubernetes", "Infrastructure: Kubernetes"),
            ("testing-playwright-e2e", "Testing: Playwright E2E"),
            ("testing-vitest-testing", "Testing: Vitest Testing"),
            ("workflow-git-workflow", "Workflow: Git Workflow"),
            ("workflow-obsidian-brain", "Workflow: Obsidian Brain"),
        ),
    ),
    ModuleCategory(
        "sdd",
        "SDD (Spec-Driven Development)",
        "📐",
        _items(
            ("sdd-openspec", "OpenSpec (project-starter-framework)"),
            ("sdd-agent-teams", "Agent Teams Lite"),
        ),
    ),
    ModuleCategory(
        "mcp",
        "MCP Servers",
        "🔌",
        _items(
            ("mcp-context7", "Context7"),
            ("mcp-engram", "Engram"),
            ("mcp-jira", "Jira"),
            ("mcp-atlassian", "Atlassian"),
            ("mcp-figma", "Figma"),
            ("mcp-notion", "Notion"),
            ("mcp-brave-search", "Brave Search"),
            ("mcp-sentry", "Sentry"),
            ("mcp-cloudflare", "Cloudflare"),
        ),
    ),
)


def label_prefix(label: str) -> str:
    """Return the text before ``": "``, or ``""`` when there is none."""
    cut = label.find(": ")
    if cut > 0:
        return label[:cut]
    return ""


def prefix_groups(labels: list[str]) -> list[GroupRange]:
    """Contiguous runs of a shared label prefix.

    Returns ``[]`` unless more than one distinct non-empty prefix exists. A
    leading unprefixed run stays headerless; a later one is grouped under
    ``UNGROUPED_TITLE``.
    """
    distinct = {prefix for prefix in map(label_prefix, labels) if prefix}
    if len(distinct) <= 1:
        return []
    groups: list[GroupRange] = []
    start = 0
    while start < len(labels):
        prefix = label_prefix(labels[start])
        end = start + 1
        while end < len(labels) and label_prefix(labels[end]) == prefix:
            end += 1
        if prefix or groups:
            groups.append(GroupRange(start, end, prefix or UNGROUPED_TITLE))
        start = end
    return groups


def ensure_category(selection: CategorySelection, category: ModuleCategory) -> list[bool]:
    """Return the category's flags, creating an all-off list on first entry."""
    flags = selection.get(category.id)
    if flags is None or len(flags) != len(category.items):
        flags = [False] * len(category.items)
        selection[category.id] = flags
    return flags


def category_selection(category: ModuleCategory, flags: list[bool]) -> SelectionList:
    """Selection list view over ``flags``; toggles write through to the list."""
    labels = [item.label for item in category.items]
    return SelectionList(
        labels,
        flags,
        prefix_groups(labels),
        header_format=GROUP_HEADER_FORMAT,
        footer=(SEPARATOR_ENTRY, Entry(EntryKind.BACK, BACK_LABEL)),
    )


def category_entries(category: ModuleCategory, flags: list[bool]) -> list[Entry]:
    return category_selection(category, flags).entries()


def collect_selected_features(selection: CategorySelection | None) -> list[str]:
    """Category ids with at least one selected item, in catalog order.

    The SDD category only contributes ``"sdd"`` when OpenSpec itself is
    selected; Agent Teams Lite is reported by ``is_agent_teams_lite_selected``.
    """
    if not selection:
        return []
    features: list[str] = []
    for category in MODULE_CATEGORIES:
        flags = selection.get(category.id)
        if flags is None:
            continue
        picked = [item.id for item, flag in zip(category.items, flags) if flag]
        if category.id == "sdd":
            if "sdd-openspec" in picked:
                features.append("sdd")
            continue
        if picked:
            features.append(category.id)
    return features


def is_agent_teams_lite_selected(selection: CategorySelection | None) -> bool:
    flags = (selection or {}).get("sdd")
    if flags is None:
        return False
    sdd = next(category for category in MODULE_CATEGORIES if category.id == "sdd")
    return any(flag and item.id == "sdd-agent-teams" for item, flag in zip(sdd.items, flags))


__all__ = [
    "BACK_LABEL",
    "CategorySelection",
    "GROUP_HEADER_FORMAT",
    "MODULE_CATEGORIES",
    "ModuleCategory",
    "ModuleItem",
    "category_entries",
    "category_selection",
    "collect_selected_features",
    "ensure_category",
    "is_agent_teams_lite_selected",
    "label_prefix",
    "UNGROUPED_TITLE",
    "prefix_groups",
]
