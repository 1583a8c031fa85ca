"""
Hard-coded records the site served before the catalog moved into the database.

The migration scripts copy these into their tables once; re-running them is
safe because every record carries a stable id.
"""
from __future__ import annotations

from datetime import datetime

from venturedesk.schemas import (
    SourceAffiliation,
    SourceCandidate,
    SourceCompany,
    SourceCuratedLink,
    SourceInvestment,
    SourceJob,
    SourceSocials,
)

WORLD = SourceCompany(
    name="World",
    logo="/images/companies/world.png",
    website="https://world.org",
    category="portfolio",
    x="https://x.com/worldnetwork",
    github="https://github.com/worldcoin",
)
PRIME_INTELLECT = SourceCompany(
    name="Prime Intellect",
    logo="/images/investments/prime-intellect.png",
    website="https://www.primeintellect.ai",
    category="portfolio",
    x="https://x.com/PrimeIntellect",
    github="https://github.com/PrimeIntellect-ai",
)
MORPHO = SourceCompany(
    name="Morpho",
    logo="/images/investments/morpho.png",
    website="https://morpho.org",
    category="portfolio",
    x="https://x.com/MorphoLabs",
)
FLASHBOTS = SourceCompany(
    name="Flashbots",
    logo="/images/network/flashbots.png",
    website="https://www.flashbots.net",
    category="network",
    github="https://github.com/flashbots",
)

JOBS: list[SourceJob] = [
    SourceJob(
        id="world-brand-designer",
        title="Brand Designer",
        company=WORLD,
        location="San Francisco, CA",
        type="full-time",
        department="Design",
        link="https://world.org/careers/brand-designer",
        tags=["design", "world"],
    ),
    SourceJob(
        id="world-protocol-engineer",
        title="Protocol Engineer",
        company=WORLD,
        location="Remote",
        remote=True,
        type="full-time",
        department="Engineering",
        link="https://world.org/careers/protocol-engineer",
        featured=True,
        tags=["protocol", "cryptography", "zkp", "world"],
    ),
    SourceJob(
        id="prime-intellect-applied-research-evals",
        title="Applied Research - Evals & Data",
        company=PRIME_INTELLECT,
        location="San Francisco, CA",
        remote=True,
        type="full-time",
        department="Research",
        link="https://jobs.ashbyhq.com/PrimeIntellect/applied-research-evals",
        featured=True,
        tags=["ai", "ml", "research", "hot"],
    ),
    SourceJob(
        id="prime-intellect-research-rl",
        title="Research Engineer - Reinforcement Learning",
        company=PRIME_INTELLECT,
        location="San Francisco, CA",
        remote=True,
        type="full-time",
        department="Research",
        link="https://jobs.ashbyhq.com/PrimeIntellect/research-engineer-rl",
        tags=["ai", "ml", "research"],
    ),
    SourceJob(
        id="morpho-smart-contract-engineer",
        title="Smart Contract Engineer",
        company=MORPHO,
        location="Paris, France",
        type="full-time",
        department="Engineering",
        link="https://jobs.lever.co/morpho-labs/smart-contract-engineer",
        tags=["defi", "protocol", "security"],
    ),
    SourceJob(
        id="flashbots-mev-researcher",
        title="MEV Researcher",
        company=FLASHBOTS,
        location="Remote",
        remote=True,
        type="full-time",
        department="Research",
        link="https://jobs.ashbyhq.com/flashbots/mev-researcher",
        tags=["mev", "research", "infra"],
    ),
]

CANDIDATES: list[SourceCandidate] = [
    SourceCandidate(
        id="candidate-rust-protocol",
        name="Ana Ferreira",
        title="Protocol Engineer",
        bio="Rust engineer working on execution clients and EVM tooling.",
        profile_image="/images/candidates/ana.png",
        skills=["rust", "reth", "evm", "protocol"],
        location="Lisbon, Portugal",
        experience="5-10",
        availability="looking",
        socials=SourceSocials(
            github="https://github.com/anaferreira",
            x="https://x.com/anaferreira",
        ),
        featured=True,
    ),
    SourceCandidate(
        id="candidate-anon-zk",
        visibility="anonymous",
        name="Hidden Name",
        anonymous_alias="ZK Researcher",
        title="Cryptography Researcher",
        bio="Works on proof systems and recursive SNARK verification.",
        skills=["zkp", "cryptography", "research"],
        location="Remote",
        experience="3-5",
        availability="open",
        socials=SourceSocials(telegram="https://t.me/venturedesk"),
    ),
    SourceCandidate(
        id="candidate-fullstack",
        name="Sam Okafor",
        title="Full Stack Developer",
        bio="TypeScript and Solidity developer shipping DeFi frontends.",
        skills=["typescript", "solidity", "frontend", "defi"],
        location="Berlin, Germany",
        experience="1-3",
        availability="not-looking",
        socials=SourceSocials(
            github="https://github.com/samokafor",
            linkedin="https://linkedin.com/in/samokafor",
            cv="https://example.com/cv/sam-okafor.pdf",
        ),
    ),
]

CURATED_LINKS: list[SourceCuratedLink] = [
    SourceCuratedLink(
        id="vitalik-glue-and-coprocessor",
        title="Glue and coprocessor architectures",
        url="https://vitalik.eth.limo/general/2024/09/02/gluecp.html",
        source="Vitalik Buterin",
        date=datetime(2024, 9, 2),
        category="research",
        featured=True,
    ),
    SourceCuratedLink(
        id="paradigm-reth-1-0",
        title="Releasing Reth 1.0",
        url="https://www.paradigm.xyz/2024/06/reth-prod",
        source="Paradigm",
        date=datetime(2024, 6, 22),
        category="infrastructure",
    ),
    SourceCuratedLink(
        id="prime-intellect-intellect-2",
        title="INTELLECT-2: the first globally distributed RL training run",
        url="https://www.primeintellect.ai/blog/intellect-2",
        source="Prime Intellect",
        date=datetime(2025, 5, 12),
        category="ai",
    ),
]

INVESTMENTS: list[SourceInvestment] = [
    SourceInvestment(
        title="Monad",
        description="High-performance EVM-compatible layer 1.",
        image_url="https://www.monad.xyz",
        logo="/images/investments/monad.png",
        tier=1,
        featured=True,
        x="https://x.com/monad_xyz",
    ),
    SourceInvestment(
        title="Morpho",
        description="Permissionless lending protocol.",
        image_url="https://morpho.org",
        logo="/images/investments/morpho.png",
        tier=1,
        featured=True,
        x="https://x.com/MorphoLabs",
        github="https://github.com/morpho-org",
    ),
    SourceInvestment(
        title="Prime Intellect",
        description="Decentralized training of frontier AI models.",
        image_url="https://www.primeintellect.ai",
        logo="/images/investments/prime-intellect.png",
        tier=1,
        featured=True,
        x="https://x.com/PrimeIntellect",
    ),
    SourceInvestment(
        title="Succinct",
        description="Prover network and the SP1 zkVM.",
        image_url="https://succinct.xyz",
        logo="/images/investments/succinct.png",
        tier=2,
        github="https://github.com/succinctlabs",
    ),
    SourceInvestment(
        title="Sorella",
        description="Application-specific sequencing to tame MEV.",
        image_url="https://sorellalabs.xyz",
        logo="/images/investments/sorella.png",
        tier=2,
    ),
    SourceInvestment(
        title="Herodotus",
        description="Storage proofs for cross-chain data access.",
        image_url="https://herodotus.dev",
        logo="/images/investments/herodotus.png",
        tier=3,
    ),
    SourceInvestment(
        title="Eclipse",
        description="SVM rollup settling on Ethereum.",
        image_url="https://www.eclipse.xyz",
        logo="/images/investments/eclipse.png",
        tier=4,
        status="inactive",
    ),
]

AFFILIATIONS: list[SourceAffiliation] = [
    SourceAffiliation(
        title="World",
        role="Research Engineer",
        date_begin="2021",
        date_end="Present",
        description="Protocol and cryptography research for World ID.",
        image_url="https://world.org",
        logo="/images/companies/world.png",
    ),
    SourceAffiliation(
        title="Bankless DAO",
        role="Contributor",
        date_begin="2021",
        date_end="2022",
        description="Writing and community work on Ethereum scaling.",
        image_url="https://www.bankless.community",
        logo="/images/bankless.png",
    ),
]
