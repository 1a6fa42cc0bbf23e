from setuptools import setup, find_packages

setup(
    name="mdrefactor",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    install_requires=[
        "requests",
        "python-dotenv",
        "colorama",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        "console_scripts": [
            "mdrefactor=mdrefactor.cli:main",
        ],
    },
    description="A tool to refactor Markdown documents using a chat-completion API",
    keywords="markdown, refactor, ai, openai",
    python_requires=">=3.7",
)
