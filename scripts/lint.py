"""
Lint script runner.
"""
import subprocess


def main():
    """
    Lint the Baby project using flake8 and pylint.
    """
    print("Running flake8...")
    subprocess.run([
        "flake8",
        "./babylang",
        "./baby.py",
        "--exclude=babylang/tests"
    ], check=True)

    print("Running pylint...")
    subprocess.run([
        "pylint",
        "./babylang",
        "./baby.py",
        "--ignore=tests"
    ], check=True)


if __name__ == "__main__":
    main()
