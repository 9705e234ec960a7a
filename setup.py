from setuptools import setup, find_namespace_packages

setup(
    name="library_companion",
    version="0.1.0",
    packages=find_namespace_packages(include=['cli*', 'core*']),
    include_package_data=True,
    python_requires=">=3.11",
    install_requires=[
        "Click",
        "SQLAlchemy>=2.0",
        "beautifulsoup4",
        "playwright",
        "pydantic>=2",
        "python-dotenv",
    ],
    extras_require={
        "mysql": ["PyMySQL"],
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "library-companion=cli.main:main",
        ],
    },
)
