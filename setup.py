from setuptools import setup, find_packages

setup(
    name="exactlinalg",
    version="1.0",
    description="Exact linear algebra for symbolic matrices",
    long_description=("Determinants, inverses, characteristic polynomials and solutions of linear systems for "
                      "matrices over exact integers, rationals, polynomials and rational functions, using "
                      "fraction free elimination and memoized minor expansion to keep expression swell in check"),
    long_description_content_type="text/plain",
    license="Apache License 2.0",
    python_requires=">=3.7",
    packages=find_packages(include=["exactlinalg", "exactlinalg.*"]),
    install_requires=["sympy", "numpy", "scipy"],
    extras_require={"test": ["pytest", "pytest-timeout"]},
    classifiers=[
        "Intended Audience :: Science/Research", "Development Status :: 3 - Alpha", "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10", "Programming Language :: Python :: 3.11", "Programming Language :: Python :: 3.12",
        "Natural Language :: English", "Operating System :: OS Independent", "Topic :: Scientific/Engineering :: Mathematics"
    ],
    keywords=["linear algebra", "symbolic computation", "determinant", "fraction free elimination"],
    zip_safe=False,
)
