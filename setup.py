from setuptools import setup, find_packages

setup(
    name="risk_path",
    version="0.1.0",
    packages=find_packages(include=["risk_path", "risk_path.*"]),
    python_requires=">=3.9",
    install_requires=[
        "numpy",
        "PyYAML",
        "matplotlib",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "risk-path=risk_path.scripts.run_solver:main",
        ]
    },
)
