from setuptools import setup, find_packages

setup(
    name="VWAPBands",                 # pip install 时用的名字
    version="0.1.0",
    author="Kaze",
    description="Rolling VWAP with standard deviation bands",

    # 自动寻找源代码 (测试不打包)
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.8",

    install_requires=[
        "pandas",
        "numpy",
    ],
    extras_require={
        "test": ["pytest"],
    },
)
