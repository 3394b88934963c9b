from setuptools import find_packages, setup

setup(
    name="roundelim",
    version="0.1.0-alpha",
    description="Automatic round elimination search - speedup and simplification tree exploration",
    package_dir={"": "roundelim/src"},
    packages=find_packages(where="roundelim/src"),
    python_requires=">=3.10",
    install_requires=["numpy", "matplotlib", "networkx", "tabulate", "tqdm"],
    extras_require={"test": ["pytest"]},
)
