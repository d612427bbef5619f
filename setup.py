import setuptools

import staffio

with open("README.md", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name=staffio.__name__,
    version=staffio.__version__,
    description="Employee and department records with validated fields",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=["staffio", "staffio.fields"],
    entry_points={"console_scripts": ["staffio=staffio.console:main"]},
    extras_require={"test": ["pytest", "pytest-cov", "pytest-xdist"]},
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.7",
)
