# setup.py - 打包与命令行入口配置

from setuptools import setup, find_packages

setup(
    name="word-grid",
    version="0.1.0",
    description="Multiplayer Boggle-style word-finding game: round state, scoring and ranking",
    packages=find_packages(include=["src", "src.*"]),
    package_data={"src.shared": ["data/words.txt"]},
    include_package_data=True,
    python_requires=">=3.8",
    install_requires=[
        "pygame>=2.0.0",
    ],
    extras_require={
        "dev": [
            "black==23.9.1",
            "flake8==6.1.0",
            "isort==5.12.0",
            "pytest==7.4.0",
            "pytest-cov==4.1.0",
            "pre-commit==3.4.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "boggle-console=src.client.console:main",
            "boggle-gui=src.client.main:main",
        ],
    },
)
