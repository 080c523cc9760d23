from setuptools import setup, find_namespace_packages  # type: ignore

setup(
    name="permcache",
    version="0.1.0",
    url="https://github.com/cleaner-bot/permcache",
    author="Leo Developer",
    author_email="git@leodev.xyz",
    description="member permission calculation from cached guild state",
    packages=find_namespace_packages(include=["permcache*"]),
    package_data={"permcache": ["py.typed"]},
    python_requires=">=3.10",
    install_requires=["hikari>=2.0.0.dev122", "python-dotenv"],
    extras_require={"test": ["pytest"]},
)
