from setuptools import find_packages, setup

with open("README.md", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="pyfastresize",
    version="0.0.1",
    author="Boris Gailleton",
    author_email="boris.gailleton@univ-rennes.fr",
    description="Fast, quality-tunable RGBA image resampling with Taichi",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/bgailleton/pyfastresize",
    packages=find_packages(exclude=["tests", "tests.*"]),
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Topic :: Multimedia :: Graphics",
        "Topic :: Scientific/Engineering :: Image Processing",
    ],
    python_requires=">=3.10",
    install_requires=[
        "taichi>=1.6.0",
        "numpy>=1.20.0",
        "click>=7.0",
        "pillow>=8.0.0",
    ],
    extras_require={
        "dev": [
            "pytest>=6.0",
            "pytest-cov",
            "black",
            "flake8",
        ],
    },
    keywords="image resize resampling lanczos convolution GPU taichi",
    project_urls={
        "Bug Reports": "https://github.com/bgailleton/pyfastresize/issues",
        "Source": "https://github.com/bgailleton/pyfastresize",
    },
    entry_points={
        "console_scripts": [
            "pfr-resize=pyfastresize.cli.resize_commands:image_resize",
            "pfr-filters=pyfastresize.cli.filter_commands:filters_info",
        ],
    },
)
