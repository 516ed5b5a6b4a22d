from setuptools import setup, find_packages

setup(
    name="webpytest",
    version="1.0.0",
    description="A pytest harness for Selenium browser UI testing with HTML reports",
    author="WebPyTest Team",
    author_email="team@webpytest.dev",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    python_requires=">=3.8",
    install_requires=[
        "selenium>=4.11.0",
        "python-dotenv>=1.0.0",
        "pytest>=7.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
        ],
    },
    entry_points={
        "pytest11": [
            "webpytest.testing.plugin = webpytest.testing.plugin",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Framework :: Pytest",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
    ],
)
