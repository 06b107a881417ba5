from setuptools import setup, find_packages

setup(
    name="qna-backend",
    version="0.1.0",
    description="Question CRUD service with in-memory and PostgreSQL storage and cached answers",
    packages=find_packages(exclude=["qna.tests", "qna.tests.*"]),
    package_data={
        "qna": [
            "alembic/*.py",
            "alembic/*.mako",
            "alembic/versions/*.py",
        ],
    },
    install_requires=[
        "fastapi>=0.100.0",
        "uvicorn>=0.23.0",
        "pydantic>=2.0.0,<3.0.0",
        "pydantic-settings>=2.0.0",
        "sqlalchemy[asyncio]>=2.0.0,<3.0.0",
        "asyncpg>=0.28.0",
        "alembic>=1.11.0",
        "redis>=5.0.1",
        "aiohttp>=3.8.0",
        "PyYAML>=6.0",
        "python-dotenv>=0.19.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4.0",
            "pytest-asyncio>=0.21.0",
            "aiosqlite>=0.19.0",
            "httpx>=0.24.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "qna-server=qna.scripts.run_server:main",
            "qna-migrate=qna.scripts.migrate:main",
        ],
    },
    python_requires=">=3.10",
)
