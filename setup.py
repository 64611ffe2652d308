from setuptools import setup, find_packages
import pathlib


here = pathlib.Path(__file__).parent.resolve()
long_description = (here / 'README.md').read_text(encoding='utf-8')

setup(
    name="lcaaj-transcriber",
    version="0.1.0",
    description="Transcribe LCAAJ field notation to IPA and expand its annotation codes",
    long_description=long_description,
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Natural Language :: English",
        "Topic :: Text Processing :: Linguistic",
    ],
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.8",
    install_requires=['schema', 'click', 'pandas', 'flask'],
    extras_require={
        'dev': ['pytest', 'pytest-cov', 'pylint', 'mypy'],
    },
    entry_points={
        'console_scripts': ['lcaaj=lcaaj_transcriber.cli:main'],
    },
)
