from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="event-emitter-mixin",
    version="1.0.0",
    description="A minimal publish/subscribe mixin that grafts on/once/trigger/remove_listener onto any object",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=["event_emitter*"]),
    classifiers=[
        "Development Status :: 5 - Production/Stable",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
    ],
    python_requires=">=3.10",
    install_requires=[
        "python-dotenv>=1.0.1",
        "pydantic>=2.10.3",
        "colorlog>=6.9.0",
    ],
    extras_require={
        "test": [
            "pytest>=8.0",
        ],
    },
)
