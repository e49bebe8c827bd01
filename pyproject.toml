[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mcmckit"
version = "2.1.0"
description = "Markov chain Monte Carlo building blocks: sampler settings, normal densities, bound transforms, proposal steps, NUTS tree building and example targets"
requires-python = ">=3.10"
keywords = ["mcmc", "bayesian", "sampling", "nuts", "hmc", "mala", "metropolis-hastings"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]
dependencies = [
    "numpy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["mcmckit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
