from setuptools import setup, find_packages

setup(
    name="transitsync-calendar",
    version="0.1.0",
    description="Weekly transit service calendars with single-date add/remove algebra.",
    author="Hamish Burke",
    author_email="hamishapps@gmail.com",  # Optional
    url="https://github.com/Slaymish/transitsync-calendar",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "pytz",
        "python-dotenv",
    ],
    extras_require={
        "test": ["pytest"],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires='>=3.7',
)
