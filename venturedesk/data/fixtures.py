"""
Deterministic rows for end-to-end tests.

Every id starts with TEST_PREFIX so cleanup can remove exactly these rows and
nothing else.
"""
from datetime import datetime

TEST_PREFIX = "test-"

TEST_JOB_TAGS = [
    {"id": f"{TEST_PREFIX}tag-ai", "slug": "ai", "label": "AI"},
    {"id": f"{TEST_PREFIX}tag-defi", "slug": "defi", "label": "DeFi"},
    {"id": f"{TEST_PREFIX}tag-protocol", "slug": "protocol", "label": "Protocol"},
    {"id": f"{TEST_PREFIX}tag-infra", "slug": "infra", "label": "Infrastructure"},
    {"id": f"{TEST_PREFIX}tag-frontend", "slug": "frontend", "label": "Frontend"},
    {"id": f"{TEST_PREFIX}tag-backend", "slug": "backend", "label": "Backend"},
    {"id": f"{TEST_PREFIX}tag-rust", "slug": "rust", "label": "Rust"},
]

TEST_JOB_ROLES = [
    {"id": f"{TEST_PREFIX}role-eng", "slug": "engineering", "label": "Engineering"},
    {"id": f"{TEST_PREFIX}role-design", "slug": "design", "label": "Design"},
    {"id": f"{TEST_PREFIX}role-product", "slug": "product", "label": "Product"},
    {"id": f"{TEST_PREFIX}role-research", "slug": "research", "label": "Research"},
]

TEST_JOBS = [
    {
        "id": f"{TEST_PREFIX}job-1",
        "title": "Senior Software Engineer",
        "company": "Test Company Alpha",
        "company_logo": "/images/test/alpha.png",
        "company_website": "https://alpha.example.com",
        "link": "https://alpha.example.com/careers/senior-engineer",
        "location": "Remote",
        "remote": "Remote",
        "type": "Full-time",
        "department": "Engineering",
        "category": "portfolio",
        "featured": True,
        "tags": ["ai", "protocol", "rust"],
        "description": "Join our team as a Senior Software Engineer.",
    },
    {
        "id": f"{TEST_PREFIX}job-2",
        "title": "Frontend Developer",
        "company": "Test Company Beta",
        "company_logo": "/images/test/beta.png",
        "company_website": "https://beta.example.com",
        "link": "https://beta.example.com/careers/frontend",
        "location": "New York, NY",
        "remote": "Hybrid",
        "type": "Full-time",
        "department": "Engineering",
        "category": "portfolio",
        "featured": False,
        "tags": ["frontend", "defi"],
        "description": "Build beautiful user interfaces for DeFi applications.",
    },
    {
        "id": f"{TEST_PREFIX}job-3",
        "title": "Protocol Researcher",
        "company": "Test Company Gamma",
        "company_logo": "/images/test/gamma.png",
        "company_website": "https://gamma.example.com",
        "link": "https://gamma.example.com/careers/researcher",
        "location": "Remote",
        "remote": "Remote",
        "type": "Full-time",
        "department": "Research",
        "category": "network",
        "featured": True,
        "tags": ["protocol", "infra"],
        "description": "Research and design next-generation protocols.",
    },
]

TEST_CANDIDATES = [
    {
        "id": f"{TEST_PREFIX}candidate-1",
        "name": "Alice Test",
        "title": "Senior Protocol Engineer",
        "location": "Remote",
        "summary": "Experienced protocol engineer with focus on ZK systems.",
        "skills": ["protocol", "rust", "zkp"],
        "experience": "5-10",
        "availability": "looking",
        "featured": True,
        "x": "https://x.com/alicetest",
        "github": "https://github.com/alicetest",
        "email": "alice@test.example.com",
    },
    {
        "id": f"{TEST_PREFIX}candidate-2",
        "name": "Bob Test",
        "title": "Full Stack Developer",
        "location": "San Francisco, CA",
        "summary": "Full stack developer specializing in DeFi frontends.",
        "skills": ["defi", "frontend", "typescript"],
        "experience": "3-5",
        "availability": "open",
        "featured": False,
        "github": "https://github.com/bobtest",
        "linkedin": "https://linkedin.com/in/bobtest",
    },
]

TEST_CURATED_LINKS = [
    {
        "id": f"{TEST_PREFIX}news-1",
        "title": "Test Article: Understanding ZK Proofs",
        "url": "https://example.com/zk-proofs",
        "source": "Test Publisher",
        "date": datetime(2025, 1, 15),
        "description": "A comprehensive guide to zero-knowledge proofs.",
        "category": "research",
        "featured": True,
    },
    {
        "id": f"{TEST_PREFIX}news-2",
        "title": "Test Article: DeFi Market Update",
        "url": "https://example.com/defi-update",
        "source": "Test News",
        "date": datetime(2025, 1, 10),
        "description": "Latest developments in the DeFi ecosystem.",
        "category": "defi",
        "featured": False,
    },
]

TEST_INVESTMENT_CATEGORIES = [
    {"id": f"{TEST_PREFIX}cat-crypto", "slug": "crypto", "label": "Crypto", "color": "amber"},
    {"id": f"{TEST_PREFIX}cat-ai", "slug": "ai", "label": "AI", "color": "violet"},
    {"id": f"{TEST_PREFIX}cat-defi", "slug": "defi", "label": "DeFi", "color": "green"},
]

TEST_INVESTMENTS = [
    {
        "id": f"{TEST_PREFIX}inv-1",
        "title": "Test Protocol Alpha",
        "description": "A test protocol for E2E testing",
        "logo": "/images/test/alpha.png",
        "tier": "1",
        "featured": True,
        "status": "active",
        "categories": ["crypto", "defi"],
        "website": "https://alpha.example.com",
        "x": "https://x.com/testalpha",
    },
    {
        "id": f"{TEST_PREFIX}inv-2",
        "title": "Test Labs Beta",
        "description": "Another test investment",
        "logo": "/images/test/beta.png",
        "tier": "2",
        "featured": False,
        "status": "active",
        "categories": ["ai"],
        "website": "https://beta.example.com",
        "github": "https://github.com/testbeta",
    },
]
