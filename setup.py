from setuptools import setup, find_namespace_packages

setup(
    name="class-address-book",
    version="0.1.0",
    packages=find_namespace_packages(include=["src.addressbook", "src.addressbook.*"]),
    install_requires=[
        "pydantic>=2.0",
        "structlog",
        "PyYAML",
    ],
    extras_require={
        "test": [
            "pytest",
            "hypothesis",
        ],
    },
    entry_points={
        "console_scripts": [
            "addressbook=src.addressbook.cli:main",
        ],
    },
    description="A command driven address book for the students, teachers and meetings of a class.",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.10",
)
