from pathlib import Path

from setuptools import find_packages, setup


def get_long_description() -> str:
    return Path("README.md").read_text(encoding="utf8")


setup(
    name="TexFmt",
    author="Federico Stra",
    author_email="stra.federico@gmail.com",
    description="(La)TeX formatter.",
    use_scm_version={"fallback_version": "0.1.0"},
    url="https://github.com/FedericoStra/texfmt",
    long_description=get_long_description(),
    long_description_content_type="text/markdown",
    license="MIT",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    install_requires=[],
    extras_require={"tests": ["pytest", "hypothesis>=6.84"]},
    entry_points={"console_scripts": ["texfmt = _texfmt.cli:main"]},
    python_requires=">=3.8",
    platforms="any",
    classifiers=[
        "Development Status :: 1 - Planning",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Text Processing :: Markup :: LaTeX",
    ],
    setup_requires=["setuptools_scm"],
    include_package_data=True,
)
