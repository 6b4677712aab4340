# Password Strength Checker
# Purpose: Test how strong a password is and generate random passwords from the terminal.
# Scoring is rule-based: criteria checklist, length/uniqueness bonuses and pattern penalties.

from cli import generate_password_flow, test_password_flow


# main app menu and selection options
def main_menu():
    while True:
        print("\n=== Password Strength Checker ===")
        print("1. Test a password")
        print("2. Generate a password")
        print("3. Exit")

        choice = input("Choose an option (1-3): ").strip()
        if choice == '1':
            test_password_flow() # score a password entered by the user
        elif choice == '2':
            generate_password_flow() # generate and score a random password
        elif choice == '3':
            print("Exiting the program. Goodbye.")
            break   # exit program
        else:
            print("Invalid choice. Please enter a number from 1 to 3.")


if __name__ == "__main__":
    main_menu()
