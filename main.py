# Main.py
""""" Entry point for the Desktop Calculator.

   Responsibilities:
   - Verify required files exist in development mode
   - Load configuration and start the Qt GUI

"""""
import sys
from pathlib import Path
from desktop_calculator import config_manager as config_manager


PROJECT_ROOT = Path(__file__).resolve().parent


def check_files_exist():

    """
      Fail fast in development if required files are missing / moved / renamed.
    """

    package_dir = PROJECT_ROOT / "desktop_calculator"

    REQUIRED = [
        package_dir / "UI.py",
        package_dir / "EquationBuilder.py",
        package_dir / "MathEngine.py",
        package_dir / "ScientificEngine.py",
        package_dir / "Operators.py",
        package_dir / "config_manager.py",
        config_manager.config_json,
        config_manager.ui_strings,
    ]

    missing_files = []
    for file_path in REQUIRED:
        if not file_path.exists():
            missing_files.append(file_path.name)

    if missing_files:
        print("Error: The following files are missing or in the wrong location:")
        for file_name in missing_files:
            print(f"- {file_name}")
        sys.exit(1)


def main():

    """
    Load configuration and start the GUI.
    - Keep this thin: no business logic here.
    """
    from desktop_calculator import UI

    all_settings = config_manager.load_setting_value("all")
    if all_settings.get("debug") == True:
        print("Config loaded:", all_settings)

    # Delegate control to the UI layer; the UI owns the event loop.
    UI.main()


if __name__ == "__main__":
    check_files_exist()
    main()
