from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="ai-megarepo",
    version="0.1.0",
    author="Your Name",
    author_email="your.email@example.com",
    description="Thin facades over OpenAI, Hugging Face and TensorFlow",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    classifiers=[
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.10",
    install_requires=[
        "python-dotenv>=1.0.0",
        "openai>=1.0.0",
        "huggingface_hub>=0.28.0",  # AsyncInferenceClient
        "tensorflow>=2.16.0",  # Keras 3 (.keras model files)
        "numpy",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-asyncio>=0.21.0",
            "black>=22.0.0",
            "flake8>=5.0.0",
        ]
    },
    entry_points={
        "console_scripts": [
            "ai-megarepo=ai_megarepo.main:main",
        ],
    },
)
