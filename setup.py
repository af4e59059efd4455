# Builds the powerheap extension in place: python setup.py build_ext -i
import os

from Cython.Build import cythonize
from setuptools import Extension, setup

COMPILER_DIRECTIVES = {
    "language_level": 3,
    "boundscheck": False,
    "wraparound": False,
    "initializedcheck": False,
    "nonecheck": False,
    "cdivision": True,
    "profile": False,
}

PACKAGES = ["powerheap", "powerheap.max_heap"]

pyx_files = [
    ("powerheap.max_heap.power_heap", "powerheap/max_heap/power_heap.pyx"),
]


def create_extensions(pyx_files: list[tuple]) -> list[Extension]:
    """
    Build one C extension per heap module, optimised with -O3 off Windows.

    Parameters
    ----------
    pyx_files : list[tuple]
        (dotted module name, .pyx path) pairs, e.g.
        ("powerheap.max_heap.power_heap", "powerheap/max_heap/power_heap.pyx").

    Returns
    -------
    list[Extension]
        Extensions ready to be passed to `cythonize`.
    """
    extensions = []
    for module_name, pyx_path in pyx_files:
        extra_compile_args = []
        if os.name != "nt":
            extra_compile_args.append("-O3")

        extension = Extension(
            name=module_name,
            sources=[pyx_path],
            extra_compile_args=extra_compile_args,
            language="c"
        )
        extensions.append(extension)
    return extensions


def main() -> None:
    """Cythonize the heap extension and install the powerheap packages."""
    # Filter out non-existing files
    files = [
        (name, path)
        for name, path in pyx_files
        if os.path.exists(path)
    ]

    if not files:
        raise RuntimeError("No .pyx files found to compile")

    extensions = create_extensions(files)

    setup(
        ext_modules=cythonize(
            extensions,
            compiler_directives=COMPILER_DIRECTIVES,
            language_level=3
        ),
        packages=PACKAGES,
        zip_safe=False
    )


if __name__ == "__main__":
    main()
