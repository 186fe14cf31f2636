from setuptools import setup, find_packages

setup(
    name="jobtracker",
    version="1.0.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.9",
    install_requires=[
        "fastapi",
        "uvicorn",
        "sqlalchemy>=2.0",
        "pydantic>=2.0",
        "python-dotenv",
        "requests>=2.32.2",
    ],
    extras_require={
        "dev": [
            "pytest",
            "httpx",
            "black",
            "isort",
            "mypy",
        ],
    },
    entry_points={
        "console_scripts": [
            "jobtracker-api=jobtracker.app.scripts.init_api:main",
        ],
    },
    author="",
    author_email="",
    description="Job application tracker API and client",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    keywords="job applications, tracker, fastapi",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: End Users/Desktop",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.12",
    ],
)
