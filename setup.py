from setuptools import setup, find_packages

setup(
    name="hardcover-sync",
    version="0.1.0",
    description="Download all user data from Hardcover into a folder for backup.",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    include_package_data=True,
    package_data={
        "hardcover_sync": ["datafetch/*.graphql"]
    },
    install_requires=[
        "requests",
        "click>=8.2",
    ],
    extras_require={
        "test": ["pytest"],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.9",
    entry_points={
        "console_scripts": [
            "hardcover-data-sync = hardcover_sync.cli:main"
        ]
    },
)
