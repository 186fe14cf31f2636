#!/usr/bin/env python3
"""Initialize the API service environment, validate configuration and serve."""

import argparse
import os
import sys
from datetime import date, timedelta

import uvicorn
from dotenv import load_dotenv

from jobtracker.core.database import get_database_url, get_session, init_database
from jobtracker.core.exceptions import ConfigurationError
from jobtracker.core.logging import setup_logging
from jobtracker.core.models import JobApplication

load_dotenv()

# Set up logging
logger = setup_logging('api_init')

SAMPLE_JOBS = [
    ('Stripe', 'Backend Engineer', 'interviewing', 3, 'Second round scheduled'),
    ('Oracle', 'Cloud Engineer', 'applied', 5, ''),
    ('Postman', 'Developer Advocate', 'rejected', 12, 'Position filled internally'),
    ('Coinbase', 'Platform Engineer', 'offer', 20, 'Offer expires Friday'),
]


def check_credentials() -> bool:
    """Verify that the record store settings are present."""
    try:
        get_database_url()
    except ConfigurationError as e:
        logger.error(f"{e.error}: {e.details}")
        return False
    return True


def validate_database() -> bool:
    """Validate database connection and schema."""
    try:
        init_database()
        logger.info("Database initialization successful")
        return True
    except Exception as e:
        logger.error(f"Database initialization failed: {str(e)}")
        return False


def add_sample_jobs() -> int:
    """Insert sample applications that are not already stored."""
    added = 0
    with get_session() as session:
        for company, title, status, days_ago, notes in SAMPLE_JOBS:
            existing = session.query(JobApplication).filter_by(company=company, title=title).first()
            if existing:
                logger.info(f"Sample job already exists: {title} at {company}")
                continue
            session.add(JobApplication(
                company=company,
                title=title,
                status=status,
                date_applied=date.today() - timedelta(days=days_ago),
                notes=notes
            ))
            added += 1
            logger.info(f"Added sample job: {title} at {company}")
    return added


def main(argv=None):
    """Main initialization routine."""
    parser = argparse.ArgumentParser(description='Initialize and run the job tracker API')
    parser.add_argument('--seed', action='store_true', help='Add sample job applications')
    parser.add_argument('--check-only', action='store_true', help='Validate configuration and exit')
    parser.add_argument('--host', default=os.getenv('HOST', '0.0.0.0'))
    parser.add_argument('--port', type=int, default=int(os.getenv('PORT', '3000')))
    args = parser.parse_args(argv)

    if not check_credentials() or not validate_database():
        logger.error("API service initialization failed")
        return 1

    if args.seed:
        logger.info(f"Added {add_sample_jobs()} sample jobs")

    logger.info("API service initialization completed successfully")
    if args.check_only:
        return 0

    uvicorn.run("jobtracker.app.main:app", host=args.host, port=args.port)
    return 0


if __name__ == "__main__":
    sys.exit(main())
