from setuptools import setup, find_packages

setup(
    name="playlist-scraper",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    install_requires=[
        "typer[all]",
        "rich",
        "pymonad>=2.4.0",
        "toolz",
        "requests",
        "beautifulsoup4",
        "pydantic>=2",
        "PyYAML",
    ],
    extras_require={
        "dev": [
            "pytest",
            "pytest-mock",
            "ruff",
            "setuptools",
            "wheel",
            "twine",
        ]
    },
    entry_points={
        "console_scripts": [
            "playlist-scraper = playlist_scraper.cli:app",
        ],
    },
    description="Reads YouTube playlists and channel listings from their web pages.",
    long_description=open("README.adoc").read(),
    long_description_content_type="text/asciidoc",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Environment :: Console",
        "Intended Audience :: End Users/Desktop",
        "Topic :: Internet :: WWW/HTTP",
    ],
    python_requires=">=3.9",
)
