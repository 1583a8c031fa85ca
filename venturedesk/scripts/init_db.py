from venturedesk.core.database import Base, get_engine
from venturedesk.models import registry  # noqa: F401 - registers every table


def main():
    Base.metadata.create_all(bind=get_engine())
    print("DB initialized.")


if __name__ == "__main__":
    main()
