from importlib.metadata import PackageNotFoundError, version

try:
    version = version("TexFmt")
except PackageNotFoundError:
    version = "0.0.0"
