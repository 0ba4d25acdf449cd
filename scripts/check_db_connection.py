"""
Check that DATABASE_URL (or MONGODB_URI / MONGO_URI) points at a reachable database.
Run: python scripts/check_db_connection.py   (exit 0 on success, 1 on failure)
"""
import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from sqlalchemy.exc import SQLAlchemyError

from printbooth.database import check_connection, engine


def main():
    print(f"Database URL: {engine.url.render_as_string(hide_password=True)}")
    try:
        report = check_connection(engine)
    except SQLAlchemyError as e:
        print(f"Database connection failed: {e}")
        print("Possible reasons:")
        print("- The database server is not running or not reachable from this host")
        print("- Username or password in the URL is wrong")
        print("- The database name does not exist")
        sys.exit(1)
    finally:
        engine.dispose()
    print("Database connection successful!")
    print(f"  Dialect:  {report.dialect}")
    print(f"  Host:     {report.host or '(local)'}")
    print(f"  Database: {report.database or '(default)'}")


if __name__ == "__main__":
    main()
