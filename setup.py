from setuptools import setup, find_packages

def parse_requirements(requirements):
    with open(requirements) as f:
        return [l.strip('\n') for l in f if l.strip('\n') and not l.startswith('#')]

requirements = parse_requirements("requirements.txt")

setup(
    name='pinport-client',
    version='0.3.0',
    install_requires=requirements,
    extras_require={
        "test": [
            "pytest>=8.0",
            "pytest-asyncio>=0.23",
            "respx>=0.21",
        ],
    },
    package_dir={"": "src"},
    packages=find_packages("src"),
    python_requires=">=3.9",
)
