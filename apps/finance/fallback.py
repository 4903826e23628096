"""
Demo fee structures and payments shown when the finance tables cannot be read
"""

FEE_STRUCTURES_FALLBACK = [
    {
        "id": 1,
        "program_name": "Bachelor of Education (B.Ed)",
        "academic_year": "2024-25",
        "tuition_fee": 35000,
        "admission_fee": 5000,
        "examination_fee": 3000,
        "library_fee": 1000,
        "laboratory_fee": 1000,
        "other_fees": 0,
        "total_fee": 45000,
        "due_date": "2024-07-15",
        "fee_structure_image": "",
        "created_at": "2024-01-01",
    },
    {
        "id": 2,
        "program_name": "Diploma in Elementary Education (D.El.Ed)",
        "academic_year": "2024-25",
        "tuition_fee": 28000,
        "admission_fee": 4000,
        "examination_fee": 2000,
        "library_fee": 500,
        "laboratory_fee": 500,
        "other_fees": 0,
        "total_fee": 35000,
        "due_date": "2024-07-15",
        "fee_structure_image": "",
        "created_at": "2024-01-01",
    },
]

PAYMENTS_FALLBACK = [
    {
        "id": 1,
        "student_id": "STU2024001",
        "fee_structure_id": 1,
        "amount_paid": 15000,
        "payment_date": "2024-06-15",
        "payment_method": "Online Transfer",
        "transaction_id": "TXN00123456",
        "status": "completed",
        "installment_number": 1,
        "due_date": "2024-06-30",
    },
    {
        "id": 2,
        "student_id": "STU2024001",
        "fee_structure_id": 1,
        "amount_paid": 15000,
        "payment_date": "2024-07-10",
        "payment_method": "Credit Card",
        "transaction_id": "TXN00123457",
        "status": "completed",
        "installment_number": 2,
        "due_date": "2024-07-15",
    },
]
