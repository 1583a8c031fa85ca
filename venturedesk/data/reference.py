"""
Static reference tables.

These supply the vocabularies used when records are created: job tags, job
roles, investment categories, the enumerations the payload schemas accept,
and the label maps served by the /reference endpoints.
Tags on jobs and candidates are drawn from these lists but are never
validated against them.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

RELATIONSHIP_CATEGORIES = ("portfolio", "network")
REMOTE_MODES = ("Remote", "Hybrid", "On-site")

AVAILABILITY_STATUSES = ("looking", "open", "not-looking")
VISIBILITY_MODES = ("public", "anonymous")
INVESTMENT_STATUSES = ("active", "inactive", "acquired")
INVESTMENT_TIERS = ("1", "2", "3", "4")
ANNOUNCEMENT_PLATFORMS = ("x", "blog", "discord", "github", "other")


@dataclass(frozen=True)
class VocabularyEntry:
    slug: str
    label: str
    color: Optional[str] = None


JOB_TAGS: tuple[VocabularyEntry, ...] = (
    VocabularyEntry("hot", "🔥 HOT", "orange"),
    VocabularyEntry("top", "⭐ TOP", "amber"),
    VocabularyEntry("ai", "AI", "purple"),
    VocabularyEntry("ml", "ML", "purple"),
    VocabularyEntry("mev", "MEV", "red"),
    VocabularyEntry("health", "Health", "green"),
    VocabularyEntry("cryptography", "Cryptography", "blue"),
    VocabularyEntry("zkp", "ZKP", "blue"),
    VocabularyEntry("protocol", "Protocol", "indigo"),
    VocabularyEntry("defi", "DeFi", "emerald"),
    VocabularyEntry("infra", "Infrastructure", "slate"),
    VocabularyEntry("trading", "Trading", "green"),
    VocabularyEntry("gaming", "Gaming", "pink"),
    VocabularyEntry("design", "Design", "rose"),
    VocabularyEntry("marketing", "Marketing", "orange"),
    VocabularyEntry("bd", "BD", "cyan"),
    VocabularyEntry("research", "Research", "violet"),
    VocabularyEntry("security", "Security", "red"),
    VocabularyEntry("legal", "Legal", "gray"),
    VocabularyEntry("world", "World", "blue"),
    VocabularyEntry("monad-ecosystem", "Monad Ecosystem", "purple"),
    VocabularyEntry("berachain-ecosystem", "Berachain Ecosystem", "amber"),
    VocabularyEntry("entry-level", "Entry Level", "green"),
    VocabularyEntry("vc", "VC", "indigo"),
    VocabularyEntry("accounting", "Accounting", "gray"),
    VocabularyEntry("bci", "BCI", "cyan"),
    VocabularyEntry("hardware", "Hardware", "slate"),
    VocabularyEntry("talent", "Talent", "pink"),
    VocabularyEntry("leadership", "Leadership", "amber"),
    VocabularyEntry("management", "Management", "amber"),
    VocabularyEntry("product", "Product", "blue"),
    VocabularyEntry("solana", "Solana", "purple"),
    VocabularyEntry("internship", "Internship", "green"),
    VocabularyEntry("growth", "Growth", "emerald"),
    VocabularyEntry("sales", "Sales", "orange"),
    VocabularyEntry("account-abstraction", "Account Abstraction", "indigo"),
    VocabularyEntry("privacy", "Privacy", "gray"),
    VocabularyEntry("web3", "Web3", "purple"),
    VocabularyEntry("frontend", "Frontend", "sky"),
    VocabularyEntry("backend", "Backend", "slate"),
    VocabularyEntry("fullstack", "Full Stack", "blue"),
    VocabularyEntry("rust", "Rust", "orange"),
    VocabularyEntry("mobile", "Mobile", "green"),
    VocabularyEntry("android", "Android", "green"),
    VocabularyEntry("ios", "iOS", "gray"),
)

JOB_TAG_LABELS: dict[str, str] = {tag.slug: tag.label for tag in JOB_TAGS}

# Skill tags that only appear on candidate profiles
CANDIDATE_TAG_LABELS: dict[str, str] = {
    "reth": "Reth",
    "alloy": "Alloy",
    "web3-devtools": "Web3 DevTools",
    "solidity": "Solidity",
    "typescript": "TypeScript",
    "rust": "Rust",
    "fullstack": "Full Stack",
    "java": "Java",
    "python": "Python",
    "c": "C",
    "compilers": "Compilers",
    "evm": "EVM",
    "anchor": "Anchor",
    "javascript": "JavaScript",
}

SKILL_LABELS: dict[str, str] = {**JOB_TAG_LABELS, **CANDIDATE_TAG_LABELS}

JOB_ROLES: tuple[VocabularyEntry, ...] = (
    VocabularyEntry("engineering", "Engineering"),
    VocabularyEntry("design", "Design"),
    VocabularyEntry("product", "Product"),
    VocabularyEntry("marketing", "Marketing"),
    VocabularyEntry("sales", "Sales"),
    VocabularyEntry("operations", "Operations"),
    VocabularyEntry("finance", "Finance"),
    VocabularyEntry("legal", "Legal"),
    VocabularyEntry("hr", "Human Resources"),
    VocabularyEntry("research", "Research"),
    VocabularyEntry("data", "Data"),
    VocabularyEntry("security", "Security"),
    VocabularyEntry("devrel", "Developer Relations"),
    VocabularyEntry("community", "Community"),
    VocabularyEntry("content", "Content"),
    VocabularyEntry("support", "Support"),
    VocabularyEntry("business-development", "Business Development"),
    VocabularyEntry("strategy", "Strategy"),
    VocabularyEntry("executive", "Executive"),
)

INVESTMENT_CATEGORY_COLORS: dict[str, str] = {
    "Crypto": "amber",
    "AI": "violet",
    "DeFi": "green",
    "MEV": "orange",
    "Privacy": "slate",
    "Health/Longevity": "rose",
    "Security": "red",
    "L1": "blue",
    "L2": "sky",
    "Governance": "purple",
    "Agents": "fuchsia",
    "Hardware": "neutral",
    "Devtools": "teal",
    "Social": "pink",
    "Network States": "indigo",
    "ZK": "cyan",
}

INVESTMENT_CATEGORIES: tuple[str, ...] = tuple(INVESTMENT_CATEGORY_COLORS)

NEWS_CATEGORY_LABELS: dict[str, str] = {
    "crypto": "Crypto",
    "ai": "AI",
    "infrastructure": "Infrastructure",
    "defi": "DeFi",
    "research": "Research",
    "product": "Product",
    "funding": "Funding",
    "general": "General",
    "x_post": "X Post",
}

AVAILABILITY_LABELS: dict[str, str] = {
    "looking": "Actively Looking",
    "open": "Open to Opportunities",
    "not-looking": "Not Currently Looking",
}

EXPERIENCE_LABELS: dict[str, str] = {
    "0-1": "0-1 years",
    "1-3": "1-3 years",
    "3-5": "3-5 years",
    "5-10": "5-10 years",
    "10+": "10+ years",
}

EXPERIENCE_LEVELS: tuple[str, ...] = tuple(EXPERIENCE_LABELS)

# Investment title -> category labels, applied by the category backfill
INVESTMENT_CATEGORY_ASSIGNMENTS: dict[str, list[str]] = {
    # Tier 1 featured
    "Exo": ["AI", "Hardware"],
    "Lighter": ["DeFi", "Crypto"],
    "Lucis": ["Health/Longevity"],
    "MegaETH": ["L2", "Crypto"],
    "Monad": ["L1", "Crypto"],
    "Morpho": ["DeFi", "Crypto"],
    "Prime Intellect": ["AI"],
    # Tier 1
    "Accountable": ["DeFi", "ZK"],
    "Dria": ["AI"],
    "Edison": ["AI", "Security", "Agents"],
    "Friend": ["AI", "Social"],
    "Octet": ["ZK", "Crypto"],
    "OWN": ["DeFi", "Crypto"],
    "Phylax": ["Security"],
    # Tier 2
    "Agora": ["Governance", "Crypto"],
    "Aligned Layer": ["ZK", "L2"],
    "Delta": ["Crypto", "L1"],
    "Fabric Cryptography": ["Hardware", "ZK"],
    "Giza": ["AI", "Agents"],
    "Praxis": ["Network States"],
    "Rhinestone": ["Devtools", "Crypto"],
    "Sorella": ["MEV", "DeFi"],
    "Succinct": ["ZK"],
    "Wildcat": ["DeFi"],
    # Tier 3
    "Berachain": ["L1", "DeFi", "Crypto"],
    "Clique": ["Devtools", "Crypto"],
    "Herodotus": ["ZK"],
    "Inco": ["Privacy", "L2"],
    "Intuition": ["Social", "Crypto"],
    "Pimlico": ["Devtools", "Crypto"],
    "Ritual": ["AI", "L1"],
    "Zenith": ["Crypto"],
    # Tier 4
    "Astria": ["L2", "Crypto"],
    "Atoma": ["AI", "Privacy"],
    "blocksense": ["ZK", "Crypto"],
    "Eclipse": ["L2", "Crypto"],
    "GasHawk": ["MEV", "Devtools"],
    "Happy Chain": ["L2", "Social"],
    "JokeRace": ["Social", "Governance"],
    "Mind Palace": ["AI"],
    "Mizu": ["DeFi", "Crypto"],
    "Mode": ["L2", "DeFi", "AI", "Agents"],
    "Movement": ["L2", "Crypto"],
    "Nebra": ["ZK"],
    "Nillion": ["Privacy", "Crypto"],
    "OnlyDust": ["Devtools"],
    "OpenQ": ["Devtools"],
    "PIN AI": ["AI", "Privacy"],
    "Pluto": ["ZK", "Devtools"],
    "Pragma": ["DeFi", "Crypto"],
}

_SLUG_STRIP_RE = re.compile(r"[^a-z0-9-]")


def to_slug(label: str) -> str:
    """'Health/Longevity' -> 'health-longevity', 'Network States' -> 'network-states'."""
    slug = re.sub(r"\s+", "-", label.strip().lower().replace("/", "-"))
    return _SLUG_STRIP_RE.sub("", slug)


def slug_to_label(slug: str) -> str:
    """Title-case a hyphenated slug for tags found on jobs but missing from JOB_TAGS."""
    return " ".join(word[:1].upper() + word[1:] for word in slug.split("-") if word)


def investment_category_entries() -> list[VocabularyEntry]:
    return [
        VocabularyEntry(to_slug(label), label, INVESTMENT_CATEGORY_COLORS.get(label))
        for label in INVESTMENT_CATEGORIES
    ]
