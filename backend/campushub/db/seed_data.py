"""
Demo Seed Data Module

Sample records shown on a fresh start, one list per managed collection.
Loaded into the in-memory managers at startup when SEED_DEMO_DATA is on.
"""
from datetime import date, datetime
from typing import Any, Dict, List

from campushub.schemas.common import EntityType

PLACEHOLDER = "https://placehold.co/600x400.png"


# ==================== People ====================

SAMPLE_STUDENTS = [
    {"id": "S1001", "name": "Alice Johnson", "class_name": "10", "section": "A", "admission_date": "2023-04-15", "roll_number": "10A01", "date_of_birth": "2008-03-10", "gender": "Female", "guardian_name": "John Johnson", "guardian_phone": "555-1111", "address": "123 Main St, Anytown"},
    {"id": "S1002", "name": "Bob Williams", "class_name": "9", "section": "B", "admission_date": "2023-05-01", "roll_number": "09B05", "date_of_birth": "2009-07-22", "gender": "Male", "guardian_name": "Sarah Williams", "guardian_phone": "555-2222", "address": "456 Oak Ave, Anytown"},
    {"id": "S1003", "name": "Charlie Brown", "class_name": "11", "section": "C", "admission_date": "2022-08-20", "roll_number": "11C12", "date_of_birth": "2007-01-15", "gender": "Male", "guardian_name": "James Brown", "guardian_phone": "555-3333", "address": "789 Pine Ln, Anytown"},
    {"id": "S1004", "name": "Diana Miller", "class_name": "NC", "section": "A", "admission_date": "2024-03-01", "roll_number": "NCA03", "date_of_birth": "2020-05-01", "gender": "Female", "guardian_name": "Laura Miller", "guardian_phone": "555-4444", "address": "321 Maple Dr, Anytown"},
    {"id": "S1005", "name": "Edward Davis", "class_name": "12", "section": "B", "admission_date": "2021-07-10", "roll_number": "12B08", "date_of_birth": "2006-11-30", "gender": "Male", "guardian_name": "Robert Davis", "guardian_phone": "555-5555", "address": "654 Willow Rd, Anytown"},
    {"id": "S1006", "name": "Fiona Garcia", "class_name": "Graduated", "section": "A", "admission_date": "2020-06-01", "roll_number": "GRADA01", "date_of_birth": "2002-09-05", "gender": "Female", "guardian_name": "Maria Garcia", "guardian_phone": "555-6666", "address": "987 Birch Ct, Anytown"},
]

SAMPLE_TEACHERS = [
    {"id": "T2001", "name": "Dr. Eleanor Vance", "subject": "Physics", "email": "eleanor.vance@example.com", "phone": "555-555-0101"},
    {"id": "T2002", "name": "Mr. Samuel Green", "subject": "Mathematics", "email": "samuel.green@example.com", "phone": "555-555-0102"},
    {"id": "T2003", "name": "Ms. Olivia Chen", "subject": "Chemistry", "email": "olivia.chen@example.com"},
    {"id": "T2004", "name": "Mr. David Lee", "subject": "History", "email": "david.lee@example.com", "phone": "555-555-0104"},
]


# ==================== Finance ====================

SAMPLE_FEE_STRUCTURES = [
    {"id": "FS1", "class_name": "10", "fee_type": "Tuition Fee", "amount": 15000, "frequency": "Quarterly"},
    {"id": "FS2", "class_name": "5", "fee_type": "Activity Fee", "amount": 2000, "frequency": "Annually"},
    {"id": "FS3", "class_name": "NC", "fee_type": "Admission Fee", "amount": 5000, "frequency": "One-time"},
    {"id": "FS4", "class_name": "12", "fee_type": "Lab Fee", "amount": 3000, "frequency": "Annually"},
]

SAMPLE_FEE_RECORDS = [
    {"id": "SFR001", "student_name": "Alice Johnson", "class_name": "10", "fee_type_description": "Tuition Fee - Q1", "amount_due": 15000, "amount_paid": 15000, "due_date": "2024-04-15", "status": "Paid", "last_payment_date": "2024-04-10", "notes": "Full payment received."},
    {"id": "SFR002", "student_name": "Bob Williams", "class_name": "9", "fee_type_description": "Activity Fee", "amount_due": 1800, "amount_paid": 0, "due_date": "2024-05-01", "status": "Pending", "notes": ""},
    {"id": "SFR003", "student_name": "Charlie Brown", "class_name": "11", "fee_type_description": "Transport Fee - Term 1", "amount_due": 7500, "amount_paid": 3000, "due_date": "2024-04-20", "status": "Partially Paid", "last_payment_date": "2024-04-18", "notes": "First installment paid."},
    {"id": "SFR004", "student_name": "Diana Miller", "class_name": "NC", "fee_type_description": "Admission Fee", "amount_due": 5000, "amount_paid": 0, "due_date": "2024-03-01", "status": "Overdue"},
    {"id": "SFR005", "student_name": "Edward Davis", "class_name": "12", "fee_type_description": "Lab Fee", "amount_due": 3000, "amount_paid": 3000, "due_date": "2024-06-10", "status": "Paid", "last_payment_date": "2024-06-08"},
]

SAMPLE_SALARIES = [
    {"id": "SR1", "teacher_id": "T2001", "teacher_name": "Dr. Eleanor Vance", "month": 6, "year": 2024, "basic_salary": 50000, "total_allowances": 5000, "total_deductions": 2000, "net_salary": 53000, "payment_status": "Paid", "payment_date": datetime(2024, 6, 28)},
    {"id": "SR2", "teacher_id": "T2002", "teacher_name": "Mr. Samuel Green", "month": 6, "year": 2024, "basic_salary": 55000, "total_allowances": 6000, "total_deductions": 2500, "net_salary": 58500, "payment_status": "Pending"},
    {"id": "SR3", "teacher_id": "T2001", "teacher_name": "Dr. Eleanor Vance", "month": 5, "year": 2024, "basic_salary": 50000, "total_allowances": 5000, "total_deductions": 2000, "net_salary": 53000, "payment_status": "Paid", "payment_date": datetime(2024, 5, 30)},
]


# ==================== Academics ====================

SAMPLE_BOOKS = [
    {"id": "BK001", "title": "The Great Gatsby", "author": "F. Scott Fitzgerald", "isbn": "978-0743273565", "total_copies": 10, "available_copies": 7},
    {"id": "BK002", "title": "To Kill a Mockingbird", "author": "Harper Lee", "isbn": "978-0061120084", "total_copies": 15, "available_copies": 12},
    {"id": "BK003", "title": "1984", "author": "George Orwell", "isbn": "978-0451524935", "total_copies": 8, "available_copies": 5},
    {"id": "BK004", "title": "Pride and Prejudice", "author": "Jane Austen", "isbn": "978-0141439518", "total_copies": 12, "available_copies": 12},
]

SAMPLE_EXAMS = [
    {"id": "EXM001", "exam_name": "Mid-Term Exams 2024", "applicable_classes": ["10", "11", "12"], "start_date": "2024-09-15", "end_date": "2024-09-30", "status": "Upcoming"},
    {"id": "EXM002", "exam_name": "Annual Exams 2024 - Junior Wing", "applicable_classes": ["NC", "1", "2", "3", "4", "5"], "start_date": "2024-03-01", "end_date": "2024-03-15", "status": "Completed"},
    {"id": "EXM003", "exam_name": "Unit Test 1 - Seniors", "applicable_classes": ["9", "10"], "start_date": "2024-07-20", "end_date": "2024-07-25", "status": "Ongoing"},
]

SAMPLE_TIMETABLE = [
    {"id": "TT1", "class_id": "10C", "day": "monday", "time": "09:00 - 10:00", "subject": "Mathematics", "room": "Room 101", "teacher": "Ms. Smith"},
    {"id": "TT2", "class_id": "10C", "day": "monday", "time": "10:00 - 11:00", "subject": "History", "room": "Room 102", "teacher": "Mr. Brown"},
    {"id": "TT3", "class_id": "10C", "day": "tuesday", "time": "09:00 - 10:00", "subject": "Physics", "room": "Lab A", "teacher": "Mr. Jones"},
    {"id": "TT4", "class_id": "5B", "day": "wednesday", "time": "11:00 - 12:00", "subject": "Art", "room": "Studio 1", "teacher": "Mr. Green"},
    {"id": "TT5", "class_id": "10C", "day": "saturday", "time": "10:00 - 11:00", "subject": "Extra Curricular", "room": "Hall A", "teacher": "Ms. Taylor"},
]


# ==================== Community ====================

def sample_notices() -> List[Dict[str, Any]]:
    # the last notice is always "issued today"
    return [
        {"id": "N1", "title": "Upcoming Parent-Teacher Meeting", "content": "A parent-teacher meeting is scheduled for next Saturday, 10:00 AM - 01:00 PM. Please register your preferred time slot.", "issued_date": datetime(2024, 7, 15), "expiry_date": date(2024, 7, 25), "author": "Admin Office", "notice_type": "Event", "target_audience": ["Parents", "Teachers"]},
        {"id": "N2", "title": "Holiday Announcement: Summer Break", "content": "The school will be closed for summer break from July 28th to August 15th. Enjoy your holidays!", "issued_date": datetime(2024, 7, 10), "author": "Admin Office", "notice_type": "Holiday", "target_audience": ["All"]},
        {"id": "N3", "title": "Library Books Due", "content": "All library books issued before June 1st must be returned by July 20th to avoid fines.", "issued_date": datetime(2024, 7, 5), "expiry_date": date(2024, 7, 20), "author": "Librarian", "notice_type": "Administrative", "target_audience": ["Students"]},
        {"id": "N4", "title": "Annual Science Fair Registration", "content": "Registrations for the Annual Science Fair are now open. Last date to submit projects is August 5th.", "issued_date": datetime(2024, 6, 20), "expiry_date": date(2024, 8, 5), "author": "Science Club", "notice_type": "Event", "target_audience": ["Students", "Teachers"]},
        {"id": "N5", "title": "PTA Meeting (Expired)", "content": "PTA meeting was held last month.", "issued_date": datetime(2024, 5, 1), "expiry_date": date(2024, 5, 15), "author": "PTA Committee", "notice_type": "Event", "target_audience": ["Parents"]},
        {"id": "N6", "title": "Urgent: Water Supply Disruption Tomorrow", "content": "Due to maintenance work, water supply will be disrupted tomorrow from 10 AM to 2 PM.", "issued_date": datetime.utcnow(), "author": "Admin Office", "notice_type": "Urgent", "target_audience": ["All"]},
    ]


SAMPLE_GALLERY = [
    {"id": "G1", "title": "Annual Sports Day", "image_url": PLACEHOLDER, "image_hint": "sports children", "date": "2024-03-15", "event_tag": "Sports"},
    {"id": "G2", "title": "Science Fair Exhibition", "image_url": PLACEHOLDER, "image_hint": "science experiment", "date": "2024-04-22", "event_tag": "Academics"},
    {"id": "G3", "title": "Art & Craft Workshop", "image_url": PLACEHOLDER, "image_hint": "art craft", "date": "2024-05-10", "event_tag": "Workshop"},
    {"id": "G4", "title": "Graduation Ceremony", "image_url": PLACEHOLDER, "image_hint": "graduation students", "date": "2024-06-01", "event_tag": "Ceremony"},
    {"id": "G5", "title": "Cultural Fest", "image_url": PLACEHOLDER, "image_hint": "cultural dance", "date": "2023-11-20", "event_tag": "Culture"},
    {"id": "G6", "title": "Tree Plantation Drive", "image_url": PLACEHOLDER, "image_hint": "tree planting", "date": "2023-09-05", "event_tag": "Social"},
]

SAMPLE_LEAVE_REQUESTS = [
    {"id": "LR001", "employee_name": "Mr. Samuel Green", "employee_id": "T2002", "leave_type": "Annual", "start_date": "2024-08-05", "end_date": "2024-08-07", "reason": "Family vacation", "status": "Pending", "applied_date": "2024-07-20"},
    {"id": "LR002", "employee_name": "Ms. Olivia Chen", "employee_id": "T2003", "leave_type": "Sick", "start_date": "2024-07-22", "end_date": "2024-07-23", "reason": "Flu symptoms", "status": "Approved", "applied_date": "2024-07-21"},
    {"id": "LR003", "employee_name": "Dr. Eleanor Vance", "employee_id": "T2001", "leave_type": "Casual", "start_date": "2024-08-10", "end_date": "2024-08-10", "reason": "Personal appointment", "status": "Pending", "applied_date": "2024-07-25"},
    {"id": "LR004", "employee_name": "Mr. David Lee", "employee_id": "T2004", "leave_type": "Unpaid", "start_date": "2024-07-28", "end_date": "2024-07-29", "reason": "Urgent travel", "status": "Rejected", "applied_date": "2024-07-26"},
]


def demo_seed() -> Dict[EntityType, List[Dict[str, Any]]]:
    """Fresh copy of every seed list, keyed by collection"""
    return {
        EntityType.STUDENTS: [dict(row) for row in SAMPLE_STUDENTS],
        EntityType.TEACHERS: [dict(row) for row in SAMPLE_TEACHERS],
        EntityType.FEE_STRUCTURES: [dict(row) for row in SAMPLE_FEE_STRUCTURES],
        EntityType.FEE_RECORDS: [dict(row) for row in SAMPLE_FEE_RECORDS],
        EntityType.SALARIES: [dict(row) for row in SAMPLE_SALARIES],
        EntityType.BOOKS: [dict(row) for row in SAMPLE_BOOKS],
        EntityType.EXAMS: [dict(row) for row in SAMPLE_EXAMS],
        EntityType.TIMETABLE: [dict(row) for row in SAMPLE_TIMETABLE],
        EntityType.NOTICES: sample_notices(),
        EntityType.GALLERY: [dict(row) for row in SAMPLE_GALLERY],
        EntityType.LEAVE_REQUESTS: [dict(row) for row in SAMPLE_LEAVE_REQUESTS],
    }
