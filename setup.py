from setuptools import setup, find_packages

setup(
    name="weatherclient",
    version="0.1.0",
    package_dir={"": "src"},
    packages=find_packages("src"),
    install_requires=["httpx>=0.24"],
    extras_require={"test": ["pytest"]},
    python_requires=">=3.8",
    description="Async client for the OpenWeatherMap current, forecast and history endpoints.",
    author="chriscoveyduck",
    author_email="",
    include_package_data=True,
)
