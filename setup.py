# setup.py

from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name='streambench',
    version='0.1.0',
    author='Justin Arndt',
    author_email='justinarndtai@gmail.com',
    description='Micro-benchmarks of sequential, declarative and parallel reductions',
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        'numpy',
        'pandas',
    ],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': [
            'streambench=streambench.tools.bench_cli:main',
        ],
    },
    zip_safe=False,
    python_requires='>=3.8',
)
