from setuptools import setup

setup(
    name="syllabus_extractor",
    version="0.1",
    packages=["syllabus_extractor"],
    python_requires=">=3.10",
    install_requires=[
        "pdfplumber>=0.10.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
)
