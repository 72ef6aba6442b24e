"""
Formatting utilities for displaying query results.

This module provides functions to format student records and statistics
into readable text for console output.
"""

from typing import List, Dict, Optional
from database import Student


def _marks(value: Optional[float]) -> str:
    return f"{value:.2f}" if value is not None else "N/A"


class StudentFormatter:
    """Utilities for formatting student data into readable text."""
    
    @staticmethod
    def format_single_student(student: Optional[Student]) -> str:
        """
        Format one student's complete record.
        
        Args:
            student: Student record, or None
            
        Returns:
            Formatted multi-line string suitable for display
        """
        if not student:
            return "Student not found."
        
        lines = []
        lines.append("=" * 80)
        lines.append("STUDENT INFORMATION")
        lines.append("=" * 80)
        lines.append(f"Name:              {student.name}")
        lines.append(f"Roll No:           {student.roll_no}")
        lines.append(f"Department:        {student.department or 'N/A'}")
        lines.append(f"Email:             {student.email or 'N/A'}")
        lines.append(f"Phone:             {student.phone or 'N/A'}")
        lines.append("")
        lines.append("-" * 80)
        lines.append("MARKS")
        lines.append("-" * 80)
        lines.append(f"Subject 1:         {_marks(student.sub1)}")
        lines.append(f"Subject 2:         {_marks(student.sub2)}")
        lines.append(f"Subject 3:         {_marks(student.sub3)}")
        lines.append("")
        lines.append(f"Percentage:        {_marks(student.percentage)}%")
        lines.append(f"Grade:             {student.grade or 'N/A'}")
        lines.append("=" * 80)
        
        return "\n".join(lines)
    
    @staticmethod
    def format_student_list(students: List[Student]) -> str:
        """
        Format a list of students in a table format.
        
        Args:
            students: List of Student records
            
        Returns:
            Formatted multi-line string suitable for display
        """
        if not students:
            return "No students found."
        
        lines = []
        lines.append(f"Found {len(students)} student(s)")
        lines.append("")
        lines.append("=" * 150)
        header = (
            f"{'RollNo':<12} {'Name':<25} {'Dept':<15} {'Sub1':<8} {'Sub2':<8} {'Sub3':<8} "
            f"{'Percent':<9} {'Grade':<6} {'Email':<30} {'Phone':<15}"
        )
        lines.append(header)
        lines.append("=" * 150)
        
        for student in students:
            line = (
                f"{student.roll_no[:11]:<12} {student.name[:24]:<25} "
                f"{(student.department or '')[:14]:<15} "
                f"{_marks(student.sub1):<8} {_marks(student.sub2):<8} {_marks(student.sub3):<8} "
                f"{_marks(student.percentage):<9} {student.grade or '':<6} "
                f"{(student.email or '')[:29]:<30} {(student.phone or '')[:14]:<15}"
            )
            lines.append(line)
        
        lines.append("=" * 150)
        
        return "\n".join(lines)
    
    @staticmethod
    def format_statistics(stats: Dict) -> str:
        """
        Format the statistics summary.
        
        Args:
            stats: Dictionary from StatisticsQueries.summary()
            
        Returns:
            Formatted multi-line string suitable for display
        """
        lines = []
        lines.append("=" * 80)
        lines.append("STUDENT STATISTICS")
        lines.append("=" * 80)
        lines.append(f"Total Students:              {stats['total_students']}")
        lines.append(f"Highest Percentage:          {stats['highest_percentage']:.2f}%")
        lines.append(f"Lowest Percentage:           {stats['lowest_percentage']:.2f}%")
        
        distribution = stats.get('grade_distribution')
        if distribution:
            lines.append("")
            lines.append("-" * 80)
            lines.append("GRADE DISTRIBUTION")
            lines.append("-" * 80)
            for grade, count in distribution.items():
                lines.append(f"  {grade}:  {count}")
        
        lines.append("=" * 80)
        
        return "\n".join(lines)
