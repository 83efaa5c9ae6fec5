from pathlib import Path
from setuptools import find_namespace_packages, setup


README = Path(__file__).parent / "README.md"

setup(
    name="funcytpl",
    version="0.1.0",
    description="Function driven template renderer for <!$ name argument> markers",
    long_description=README.read_text(encoding="utf-8") if README.exists() else "",
    long_description_content_type="text/markdown",
    author="GAHEOS",
    python_requires=">=3.8",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["funcytpl", "funcytpl.*"]),
    extras_require={"test": ["pytest>=7"]},
)
