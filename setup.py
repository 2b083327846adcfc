from setuptools import setup, find_packages

setup(
    name="text-style",
    version="0.3.0",
    description="Types and conversions for styled text",
    packages=find_packages(include=["text_style", "text_style.*"]),
    install_requires=[
        "rich",
        "prompt-toolkit",
    ],
    extras_require={
        "test": ["pytest"],
    },
    python_requires=">=3.11",
)
