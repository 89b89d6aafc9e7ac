"""Setup script for the citebib package."""
from setuptools import setup, find_packages

setup(
    name="citebib",
    version="1.0.0",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "requests>=2.27.0",
        "python-dotenv>=0.19.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "citebib=citebib.__main__:main",
        ],
    },
    python_requires=">=3.8",
    author="Stenford Ruvinga",
    author_email="stenford41@hotmail.com",
    description="Build an Asciidoc bibliography from <<citekey>> markers using Zotero Better BibTeX",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    keywords="reference citation academic bibliography asciidoc zotero",
    include_package_data=True,
    classifiers=[
        "Development Status :: 5 - Production/Stable",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Topic :: Text Processing :: Markup",
    ],
)
