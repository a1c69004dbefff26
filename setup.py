from setuptools import setup, find_packages

setup(
    name="local-reading-tutor",
    version="0.1.0",
    description="Reading comprehension exercises with typo-tolerant answer checking",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    python_requires=">=3.9",
    install_requires=[
        "numpy>=1.24.0",
        "PyYAML>=6.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.4.0",
            "pytest-cov>=4.1.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "reading-tutor=reading_tutor.cli:main",
        ],
    },
)
