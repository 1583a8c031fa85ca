"""Import every model so Base.metadata knows about all tables."""
from venturedesk.models.candidate import Candidate
from venturedesk.models.job import Job, JobRole, JobTag
from venturedesk.models.misc import ApiKey, BlogPost
from venturedesk.models.news import Announcement, CuratedLink
from venturedesk.models.portfolio import Affiliation, Investment, InvestmentCategory

ALL_MODELS = (
    Job,
    JobTag,
    JobRole,
    Candidate,
    CuratedLink,
    Announcement,
    Investment,
    Affiliation,
    InvestmentCategory,
    ApiKey,
    BlogPost,
)
