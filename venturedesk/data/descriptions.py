"""Job descriptions collected from the companies' career pages, keyed by job id."""

JOB_DESCRIPTIONS: dict[str, str] = {
    "world-brand-designer": """Brand Designer

Shape how World looks and feels across product, web, events and campaigns.

**Responsibilities:**
- Own the visual identity and evolve the brand system
- Design launch campaigns, motion assets and event materials
- Partner with product design to keep the app and the brand consistent

**Requirements:**
- 5+ years of brand or visual design experience
- A portfolio showing systems thinking, typography and motion
- Comfort working in a fast-moving, highly technical company""",

    "prime-intellect-applied-research-evals": """Applied Research - Evals & Data

A customer-facing role at the intersection of RL/post-training methods, applied data and agent systems.

**Responsibilities:**
- Work side-by-side with customers to understand workflows, data sources and bottlenecks
- Prototype agents, data pipelines and eval harnesses tailored to real use cases
- Build evaluation harnesses and verifiers to measure reasoning and agentic behavior

**Requirements:**
- Experience in post-training, RL or large-scale model alignment
- Expertise with distributed training/inference frameworks (vLLM, sglang, Ray)

**Benefits:** Competitive compensation with equity, remote or SF, visa sponsorship.""",

    "prime-intellect-research-rl": """Research Engineer - Reinforcement Learning

Develop novel RL methods for training frontier AI models as part of the open superintelligence stack.

**Responsibilities:**
- Design and implement RL and post-training methods (RLHF, RLVR, GRPO)
- Contribute to open-source RL libraries and publish research

**Requirements:**
- Strong background in reinforcement learning research
- Proficiency with PyTorch and distributed training frameworks""",

    "flashbots-mev-researcher": """MEV Researcher

Study transaction ordering, block building and the economics of MEV, and turn the findings into open infrastructure.

**Responsibilities:**
- Publish research on auctions, PBS and order flow
- Prototype mechanisms with the engineering team

**Requirements:**
- Background in mechanism design, economics or distributed systems
- Familiarity with Ethereum block production""",
}
