"""
Demo invoice records in backend wire format.

Used by DemoInvoiceService so the UI can be explored without the remote
API. Values are kept internally consistent (line totals and charges match
pieces times unit price).
"""

DEMO_INVOICES = [
    {
        "invoiceNumber": "INV-2636",
        "date": "2024-03-04",
        "terms": "COD",
        "customer": {
            "name": "Meera Shah",
            "address": "14 Diamond Street",
            "city": "Surat",
            "phone": "+91 98250 11223",
        },
        "items": [
            {
                "stockId": "DR-1042",
                "description": "Round brilliant diamond, VS1",
                "pieces": 2,
                "weight": 1.12,
                "pricePerUnit": 1850.0,
                "total": 3700.0,
            },
            {
                "stockId": "GB-0007",
                "description": "18k gold band",
                "pieces": 1,
                "weight": 0.0,
                "pricePerUnit": 640.0,
                "total": 640.0,
            },
        ],
        "charges": {
            "subtotal": 4340.0,
            "shipping": 25.0,
            "other": 0.0,
            "totalAmount": 4365.0,
        },
    },
    {
        "invoiceNumber": "INV-2637",
        "date": "2024-03-11",
        "terms": "Net 30",
        "customer": {
            "name": "Smithson Fine Jewelry",
            "address": "220 Canal Street",
            "city": "New York",
            "phone": "",
        },
        "items": [
            {
                "stockId": "EM-3310",
                "description": "Colombian emerald, oval cut",
                "pieces": 3,
                "weight": 2.4,
                "pricePerUnit": 920.5,
                "total": 2761.5,
            },
        ],
        "charges": {
            "subtotal": 2761.5,
            "shipping": 40.0,
            "other": 12.5,
            "totalAmount": 2814.0,
        },
    },
    {
        "invoiceNumber": "INV-2638",
        "date": "2024-04-02",
        "terms": "COD",
        "customer": {
            "name": "Ravi Patel",
            "address": "8 Zaveri Bazaar",
            "city": "Mumbai",
            "phone": "+91 22 2342 7788",
        },
        "items": [
            {
                "stockId": "",
                "description": "Pearl strand, 7mm akoya",
                "pieces": 5,
                "weight": 0.0,
                "pricePerUnit": 210.0,
                "total": 1050.0,
            },
        ],
        "charges": {
            "subtotal": 1050.0,
            "shipping": 0.0,
            "other": 0.0,
            "totalAmount": 1050.0,
        },
    },
]
