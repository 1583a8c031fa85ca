from __future__ import annotations

from flask import Flask
from flask_cors import CORS

from venturedesk.api.v1 import candidates as v1_candidates
from venturedesk.api.v1 import jobs as v1_jobs
from venturedesk.api.v1 import news as v1_news
from venturedesk.api.v1 import portfolio as v1_portfolio
from venturedesk.api.v1 import reference as v1_reference

app = Flask(__name__)

CORS(app)

app.register_blueprint(v1_jobs.bp, url_prefix="/api/v1")
app.register_blueprint(v1_candidates.bp, url_prefix="/api/v1")
app.register_blueprint(v1_news.bp, url_prefix="/api/v1")
app.register_blueprint(v1_portfolio.bp, url_prefix="/api/v1")
app.register_blueprint(v1_reference.bp, url_prefix="/api/v1")


@app.get("/health")
def health():
    return {"status": "healthy"}


def main() -> None:
    from venturedesk.core.config import settings
    from venturedesk.core.logsetup import configure_logging

    configure_logging()
    app.run(host=settings.API_HOST, port=settings.API_PORT, debug=settings.DEBUG)


if __name__ == "__main__":
    main()
