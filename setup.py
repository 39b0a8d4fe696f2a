from setuptools import setup, find_packages

setup(
    name="chatwidget",
    version="0.1.0",
    description="A chat widget with a markdown-aware typing reveal",
    packages=find_packages(include=["chatwidget", "chatwidget.*"]),
    install_requires=[
        "httpx",
        "rich",
        "prompt-toolkit",
        "python-ulid",
    ],
    extras_require={
        "test": [
            "pytest",
            "pytest-asyncio",
        ],
        "examples": [
            "fastapi",
            "uvicorn",
        ],
    },
    python_requires=">=3.11",
)
