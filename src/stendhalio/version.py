from importlib.metadata import PackageNotFoundError, version

try:
    version = version("StendhalIO")
except PackageNotFoundError:
    version = "0.0.0"
