import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name="btrfsreport",
    version="1.0.0",
    author="Jordan Leppert",
    author_email="jordanleppert@gmail.com",
    description="Reports devices, space usage and subvolumes of btrfs filesystems from the btrfs tool's output",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/JordanL2/SystemMonitor",
    packages=setuptools.find_namespace_packages(include=['btrfsreport', 'btrfsreport.*']),
    install_requires=[
        'pyyaml',
    ],
    extras_require={
        'test': ['pytest>=7'],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: LGPL-2.1 License",
        "Operating System :: POSIX :: Linux",
    ],
    python_requires='>=3.7',
    entry_points = {'console_scripts': [
        'btrfsreport=btrfsreport.cli:main',
        ], },
)
