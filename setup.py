import setuptools

with open("requirements.txt", "r") as requirements:
    reqs = requirements.read().splitlines()

setuptools.setup(
    name='HTMLSelect',
    version='1.1.0',
    description="Builds the HTML for <select> dropdown lists",
    author="",
    author_email="",
    packages=setuptools.find_packages(include=['HTMLSelect*'], exclude=['HTMLSelect.test*']),
    include_package_data=True,
    install_requires=reqs,
    extras_require={
        'test': ['pytest'],
    },
)
