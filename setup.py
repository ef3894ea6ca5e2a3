from Cython.Build import cythonize
from picobuild import get_cython_build_dir
from setuptools import Extension, find_packages, setup

cythonized_extensions = cythonize(
    [
        Extension(
            "edkeys.curves.ed25519",
            ["src/edkeys/curves/ed25519.py"],
            extra_compile_args=[
                "-O3",
                "-Wno-unused-function",
                "-Wno-unused-variable",
            ],
            language="c",
        ),
    ],
    compiler_directives={
        "language_level": 3,
        "boundscheck": False,
        "wraparound": False,
        "cdivision": True,
        "nonecheck": False,
        "initializedcheck": False,
        "annotation_typing": False,
    },
    build_dir=get_cython_build_dir(),
)

if __name__ == "__main__":
    setup(
        name="edkeys",
        version="0.1.0",
        description="Ed25519 key service: generate, export, sign, verify over opaque handles",
        packages=find_packages(where="src"),
        package_dir={"": "src"},
        python_requires=">=3.12",
        install_requires=["cryptography>=41"],
        extras_require={"test": ["pytest>=7"]},
        ext_modules=cythonized_extensions,
    )
