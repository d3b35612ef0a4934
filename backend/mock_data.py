# backend/mock_data.py
"""
Demo customers for the dashboard, in the camelCase wire format.

Metrics were tuned by hand toward a target score per customer; the targets are
approximate (the formulas are fixed, the data was adjusted around them):

    1 John Smith       ~85  healthy
    2 Sarah Johnson    ~45  warning
    3 Michael Brown    ~15  critical
    4 Emily Davis      ~92  healthy
    5 David Wilson     ~60  warning
    6 Lisa Anderson    ~73  healthy
    7 Robert Chen      ~88  healthy
    8 Maria Rodriguez  ~35  warning
"""

from typing import Any, Dict

CUSTOMERS: Dict[str, Dict[str, Any]] = {
    "1": {
        "name": "John Smith",
        "metrics": {
            "payment": {"daysSinceLastPayment": 10, "averagePaymentDelay": 2, "outstandingBalance": 0},
            "engagement": {"monthlyLogins": 18, "featuresUsed": 12, "supportTicketsOpened": 2},
            "contract": {"daysUntilRenewal": 200, "contractValue": 50000, "hasRecentUpgrade": False},
            "support": {"averageResolutionTime": 6, "satisfactionScore": 4.5, "escalationCount": 0},
        },
    },
    "2": {
        "name": "Sarah Johnson",
        "metrics": {
            "payment": {"daysSinceLastPayment": 45, "averagePaymentDelay": 10, "outstandingBalance": 2500},
            "engagement": {"monthlyLogins": 8, "featuresUsed": 5, "supportTicketsOpened": 6},
            "contract": {"daysUntilRenewal": 120, "contractValue": 25000, "hasRecentUpgrade": False},
            "support": {"averageResolutionTime": 15, "satisfactionScore": 3.0, "escalationCount": 2},
        },
    },
    "3": {
        "name": "Michael Brown",
        "metrics": {
            "payment": {"daysSinceLastPayment": 85, "averagePaymentDelay": 30, "outstandingBalance": 8000},
            "engagement": {"monthlyLogins": 2, "featuresUsed": 2, "supportTicketsOpened": 12},
            "contract": {"daysUntilRenewal": 25, "contractValue": 15000, "hasRecentUpgrade": False},
            "support": {"averageResolutionTime": 48, "satisfactionScore": 1.5, "escalationCount": 7},
        },
    },
    "4": {
        "name": "Emily Davis",
        "metrics": {
            "payment": {"daysSinceLastPayment": 5, "averagePaymentDelay": 0, "outstandingBalance": 0},
            "engagement": {"monthlyLogins": 22, "featuresUsed": 18, "supportTicketsOpened": 1},
            "contract": {"daysUntilRenewal": 250, "contractValue": 100000, "hasRecentUpgrade": True},
            "support": {"averageResolutionTime": 3, "satisfactionScore": 5.0, "escalationCount": 0},
        },
    },
    "5": {
        "name": "David Wilson",
        "metrics": {
            "payment": {"daysSinceLastPayment": 30, "averagePaymentDelay": 7, "outstandingBalance": 1200},
            "engagement": {"monthlyLogins": 12, "featuresUsed": 8, "supportTicketsOpened": 4},
            "contract": {"daysUntilRenewal": 150, "contractValue": 35000, "hasRecentUpgrade": False},
            "support": {"averageResolutionTime": 10, "satisfactionScore": 3.5, "escalationCount": 1},
        },
    },
    "6": {
        "name": "Lisa Anderson",
        "metrics": {
            "payment": {"daysSinceLastPayment": 15, "averagePaymentDelay": 3, "outstandingBalance": 500},
            "engagement": {"monthlyLogins": 16, "featuresUsed": 10, "supportTicketsOpened": 3},
            "contract": {"daysUntilRenewal": 190, "contractValue": 45000, "hasRecentUpgrade": False},
            "support": {"averageResolutionTime": 8, "satisfactionScore": 4.0, "escalationCount": 1},
        },
    },
    "7": {
        "name": "Robert Chen",
        "metrics": {
            "payment": {"daysSinceLastPayment": 7, "averagePaymentDelay": 1, "outstandingBalance": 0},
            "engagement": {"monthlyLogins": 20, "featuresUsed": 15, "supportTicketsOpened": 2},
            "contract": {"daysUntilRenewal": 220, "contractValue": 120000, "hasRecentUpgrade": True},
            "support": {"averageResolutionTime": 4, "satisfactionScore": 4.8, "escalationCount": 0},
        },
    },
    "8": {
        "name": "Maria Rodriguez",
        "metrics": {
            "payment": {"daysSinceLastPayment": 60, "averagePaymentDelay": 20, "outstandingBalance": 4500},
            "engagement": {"monthlyLogins": 5, "featuresUsed": 4, "supportTicketsOpened": 8},
            "contract": {"daysUntilRenewal": 40, "contractValue": 20000, "hasRecentUpgrade": False},
            "support": {"averageResolutionTime": 28, "satisfactionScore": 2.5, "escalationCount": 4},
        },
    },
}
