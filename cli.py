#!/usr/bin/env python3
"""
SmartStudent Records - Command Line Interface

Logs an administrator in, then offers create/read/update/delete,
search, statistics and export over the student records table.
"""

import argparse
import logging
import math
import os
import sys
from getpass import getpass
from typing import Callable, List

from database import (
    DATABASE_URL, create_db_engine, create_session_factory,
    RecordStoreError, Student,
)
from queries import (
    StudentStore, StatisticsQueries, CredentialVerifier,
    PlaintextCredentialVerifier, StudentFormatter,
)
from queries.export import export_students_to_excel, export_students_to_csv

logger = logging.getLogger(__name__)


class MenuItem:
    """Represents a single menu item."""
    
    def __init__(self, key: str, label: str, action: Callable, description: str = ""):
        self.key = key
        self.label = label
        self.action = action
        self.description = description
    
    def display(self) -> str:
        """Return formatted menu item for display."""
        return f"  {self.key}. {self.label}"


class MenuSystem:
    """Handles menu display and navigation."""
    
    def __init__(self, title: str, input_func: Callable = input):
        self.title = title
        self.items: List[MenuItem] = []
        self.running = True
        self.input = input_func

    def add_item(self, key: str, label: str, action: Callable, description: str = ""):
        """Add a menu item."""
        self.items.append(MenuItem(key, label, action, description))
    
    def add_separator(self):
        """Add a visual separator."""
        self.items.append(MenuItem("", "", lambda: None))
    
    def display(self):
        """Display the menu."""
        print("\n" + "="*80)
        print(self.title)
        print("="*80)
        print()
        
        for item in self.items:
            if item.key:  # Skip separators in display
                print(item.display())
            else:
                print()  # Empty line for separator
        
        print("\n  0. Exit")
        print("="*80)
    
    def get_choice(self) -> str:
        """Get user's menu choice."""
        while True:
            choice = self.input("\nEnter your choice: ").strip()
            if choice == "0":
                return "0"
            
            # Check if valid choice
            if any(item.key == choice for item in self.items if item.key):
                return choice
            
            print("✗ Invalid choice. Please try again.")
    
    def run(self):
        """Run the menu loop."""
        while self.running:
            self.display()
            choice = self.get_choice()
            
            if choice == "0":
                self.running = False
                print("\nExiting...")
                break
            
            for item in self.items:
                if item.key == choice:
                    print("\n" + "="*80)
                    try:
                        item.action()
                    except KeyboardInterrupt:
                        print("\n\n⚠️  Action cancelled by user.")
                    except RecordStoreError as e:
                        # One failed operation must not end the session
                        logger.error(f"Action '{item.label}' failed: {e}")
                        print(f"\n✗ Database error: {e}")
                    print("="*80)
                    break


class CLIActions:
    """All CLI actions organized by category."""
    
    def __init__(self, store: StudentStore, stats: StatisticsQueries,
                 input_func: Callable = input):
        self.store = store
        self.stats = stats
        self.input = input_func
    
    # =========================================================================
    # RECORD MAINTENANCE
    # =========================================================================
    
    def add_student(self):
        """Prompt for a new student's details and save them."""
        print("ADD STUDENT")
        print("-" * 80)
        roll_no = self.input("Enter Roll No: ").strip()
        student = self._prompt_student_details(roll_no)
        self.store.add(student)
        print(f"\n✓ Student added successfully! ({student.percentage:.2f}%, grade {student.grade})")
    
    def view_students(self):
        """List every stored student."""
        print("ALL STUDENTS")
        print("-" * 80)
        print(StudentFormatter.format_student_list(self.store.get_all()))
    
    def update_student(self):
        """Overwrite the details of the student(s) with a given roll number."""
        print("UPDATE STUDENT")
        print("-" * 80)
        roll_no = self.input("Roll No to update: ").strip()
        student = self._prompt_student_details(roll_no, prefix="new ")
        if self.store.update(roll_no, student):
            print("\n✓ Student updated successfully!")
        else:
            print(f"\n✗ Student not found with Roll No '{roll_no}'")
    
    def delete_student(self):
        """Delete the student(s) with a given roll number."""
        print("DELETE STUDENT")
        print("-" * 80)
        roll_no = self.input("Roll No to delete: ").strip()
        if self.store.delete(roll_no):
            print("\n✓ Student deleted successfully!")
        else:
            print(f"\n✗ Student not found with Roll No '{roll_no}'")
    
    # =========================================================================
    # SEARCH & STATISTICS
    # =========================================================================
    
    def search_students(self):
        """Search by roll number, name, department or marks threshold."""
        print("SEARCH STUDENTS")
        print("-" * 80)
        print("\nSearch by:")
        print("  1. Roll No")
        print("  2. Name")
        print("  3. Department")
        print("  4. Marks threshold (percentage at least)")
        
        choice = self.input("\nEnter choice (1-4): ").strip()
        
        if choice == "1":
            roll_no = self.input("Enter Roll No: ").strip()
            students = self.store.search_by_roll_no(roll_no)
        elif choice == "2":
            name = self.input("Enter Name: ").strip()
            students = self.store.search_by_name(name)
        elif choice == "3":
            department = self.input("Enter Department: ").strip()
            students = self.store.search_by_department(department)
        elif choice == "4":
            threshold = self._prompt_float("Enter Marks Threshold: ")
            students = self.store.search_by_marks_range(threshold)
        else:
            print("✗ Invalid search option!")
            return
        
        if len(students) == 1:
            print(StudentFormatter.format_single_student(students[0]))
        else:
            print(StudentFormatter.format_student_list(students))
    
    def show_statistics(self):
        """Show count, highest and lowest percentage and grade distribution."""
        print(StudentFormatter.format_statistics(self.stats.summary()))
    
    # =========================================================================
    # EXPORT
    # =========================================================================
    
    def export_excel(self):
        """Export all students plus a statistics sheet to an Excel workbook."""
        filename = self.input("Enter file name [students.xlsx]: ").strip() or "students.xlsx"
        students = self.store.get_all()
        path = export_students_to_excel(students, filename, summary=self.stats.summary())
        print(f"\n✓ Exported {len(students)} student(s) to {path}")
    
    def export_csv(self):
        """Export all students to a CSV file."""
        filename = self.input("Enter file name [students.csv]: ").strip() or "students.csv"
        students = self.store.get_all()
        path = export_students_to_csv(students, filename)
        print(f"\n✓ Exported {len(students)} student(s) to {path}")
    
    # =========================================================================
    # HELPER METHODS
    # =========================================================================
    
    def _prompt_float(self, prompt: str) -> float:
        """Ask until the answer parses as a number."""
        while True:
            answer = self.input(prompt).strip()
            try:
                value = float(answer)
            except ValueError:
                print(f"✗ '{answer}' is not a number. Please try again.")
                continue
            if not math.isfinite(value):
                print(f"✗ '{answer}' is not a finite number. Please try again.")
                continue
            return value
    
    def _prompt_student_details(self, roll_no: str, prefix: str = "") -> Student:
        """Collect the remaining fields and derive percentage and grade."""
        name = self.input(f"Enter {prefix}Name: ").strip()
        department = self.input(f"Enter {prefix}Department: ").strip()
        email = self.input(f"Enter {prefix}Email: ").strip()
        phone = self.input(f"Enter {prefix}Phone: ").strip()
        sub1 = self._prompt_float("Enter Sub1 Marks: ")
        sub2 = self._prompt_float("Enter Sub2 Marks: ")
        sub3 = self._prompt_float("Enter Sub3 Marks: ")
        return Student.from_marks(name, roll_no, department, email, phone, sub1, sub2, sub3)


def login(verifier: CredentialVerifier, input_func: Callable = input,
          password_func: Callable = getpass) -> bool:
    """Prompt for credentials and check them."""
    username = input_func("Enter username: ").strip()
    password = password_func("Enter password: ")
    return verifier.authenticate(username, password)


def build_menu(store: StudentStore, stats: StatisticsQueries,
               input_func: Callable = input) -> MenuSystem:
    """Wire every action into the main menu."""
    menu = MenuSystem("SmartStudent Records", input_func)
    actions = CLIActions(store, stats, input_func)
    
    menu.add_item("1", "✚ Add student", actions.add_student)
    menu.add_item("2", "☰ View students", actions.view_students)
    menu.add_item("3", "✎ Update student", actions.update_student)
    menu.add_item("4", "✗ Delete student", actions.delete_student)
    menu.add_item("5", "⌕ Search students", actions.search_students)
    menu.add_item("6", "∑ Statistics", actions.show_statistics)
    
    menu.add_separator()
    
    menu.add_item("7", "⎙ Export records to Excel", actions.export_excel)
    menu.add_item("8", "↥ Export records to CSV", actions.export_csv)
    return menu


def run_session(session_factory, input_func: Callable = input,
                password_func: Callable = getpass) -> int:
    """Authenticate, then run the menu. Returns the process exit status."""
    verifier = PlaintextCredentialVerifier(session_factory)
    if not login(verifier, input_func, password_func):
        print("Invalid credentials! Exiting.")
        return 1
    print("Login successful! Welcome.")
    
    menu = build_menu(StudentStore(session_factory), StatisticsQueries(session_factory), input_func)
    menu.run()
    return 0


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(description="SmartStudent Records command line interface.")
    parser.add_argument('--database-url', default=DATABASE_URL,
                        help="SQLAlchemy URL of the student database (default: from .env / DB_* variables)")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=os.getenv('LOG_LEVEL', 'WARNING').upper(),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    
    engine = create_db_engine(args.database_url)
    try:
        return run_session(create_session_factory(engine))
    except RecordStoreError as e:
        print(f"\n✗ Database connection failed: {e}")
        return 1
    except (KeyboardInterrupt, EOFError):
        print("\nExiting...")
        return 130
    finally:
        engine.dispose()


if __name__ == '__main__':
    sys.exit(main())
