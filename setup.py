from setuptools import setup, find_packages

setup(
    name="cardsplit",
    version="0.1.0",
    packages=find_packages(include=["cardsplit", "cardsplit.*"]),
    install_requires=[
        "pandas",
        "numpy",
    ],
    extras_require={
        "test": [
            "pytest",
            "pytest-dependency",
        ],
    },
    author="Price Hatfield",
    description="A tool for categorizing credit card transactions for Splitwise",
    python_requires=">=3.8",
)
