[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hadoopop"
version = "0.1.0"
description = "HadoopCluster resource model, admission defaulting and validation, listers and an in-memory client"
requires-python = ">=3.10"
dependencies = []
keywords = ["hadoop", "hdfs", "yarn", "kubernetes", "operator", "cluster", "admission"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Clustering",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["hadoopop"]

[tool.pytest.ini_options]
addopts = "-ra"
