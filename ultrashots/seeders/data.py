"""
Seed data definitions (constants only).

The seeders in this package read these definitions; adding a customer,
role or user only needs a change here.
"""

from datetime import datetime, timezone

from ultrashots.core.database.entities.roles import SUPER_ADMIN_ROLE

# =====================================================================
# Roles & permissions
# =====================================================================

RESOURCES = ("users", "roles", "permissions", "customers", "projects", "subscribers", "settings")
ACTIONS = ("view", "create", "edit", "delete")
EXTRA_PERMISSIONS = ("dashboard.view", "projects.publish", "subscribers.export")

PERMISSIONS = tuple(f"{resource}.{action}" for resource in RESOURCES for action in ACTIONS) + EXTRA_PERMISSIONS

ROLES = (
    {"name": SUPER_ADMIN_ROLE, "display_name": "Super Admin", "description": "Unrestricted access"},
    {"name": "admin", "display_name": "Administrator", "description": "Manages everything but access control"},
    {"name": "manager", "display_name": "Manager", "description": "Manages customers, projects and subscribers"},
    {"name": "editor", "display_name": "Editor", "description": "Edits and publishes portfolio projects"},
    {"name": "author", "display_name": "Author", "description": "Drafts portfolio projects"},
    {"name": "viewer", "display_name": "Viewer", "description": "Read-only access"},
)

ROLE_PERMISSIONS = {
    SUPER_ADMIN_ROLE: PERMISSIONS,
    "admin": tuple(p for p in PERMISSIONS if not p.startswith(("roles.", "permissions."))),
    "manager": (
        "dashboard.view",
        "users.view",
        "customers.view",
        "customers.create",
        "customers.edit",
        "customers.delete",
        "projects.view",
        "projects.create",
        "projects.edit",
        "projects.delete",
        "projects.publish",
        "subscribers.view",
        "subscribers.create",
        "subscribers.edit",
        "subscribers.export",
    ),
    "editor": (
        "dashboard.view",
        "customers.view",
        "projects.view",
        "projects.create",
        "projects.edit",
        "projects.publish",
        "subscribers.view",
    ),
    "author": ("dashboard.view", "projects.view", "projects.create", "projects.edit"),
    "viewer": ("dashboard.view", "customers.view", "projects.view", "subscribers.view"),
}

# =====================================================================
# Users
# =====================================================================

# The super admin is read from the seed configuration; every other user
# gets the configured default password.
USERS = (
    {"name": "Admin User", "email": "admin@example.com", "roles": ("admin",)},
    {"name": "Maria Manager", "email": "manager@example.com", "roles": ("manager",)},
    {"name": "Eddie Editor", "email": "editor@example.com", "roles": ("editor",)},
    {"name": "Alex Author", "email": "author@example.com", "roles": ("author",)},
    {"name": "Victor Viewer", "email": "viewer@example.com", "roles": ("viewer",)},
    {"name": "Sarah Chen", "email": "sarah.chen@example.com", "roles": ("manager",)},
    {"name": "David Okafor", "email": "david.okafor@example.com", "roles": ("editor",)},
    {"name": "Lena Fischer", "email": "lena.fischer@example.com", "roles": ("author",)},
    {"name": "Tom Becker", "email": "tom.becker@example.com", "roles": ("viewer",)},
    {"name": "Priya Nair", "email": "priya.nair@example.com", "roles": ("editor", "author")},
)

# =====================================================================
# Customers & projects
# =====================================================================

CUSTOMERS = (
    {"name": "Olivia Hart", "email": "olivia@northwind.example", "company": "Northwind Coffee", "status": "active"},
    {"name": "Ben Carter", "email": "ben@bluepeak.example", "company": "Blue Peak Outdoors", "status": "active"},
    {"name": "Chloe Martin", "email": "chloe@lumen.example", "company": "Lumen Studio", "status": "active"},
    {"name": "Daniel Ruiz", "email": "daniel@ferro.example", "company": "Ferro Motors", "status": "active"},
    {"name": "Emma Novak", "email": "emma@greenleaf.example", "company": "Greenleaf Market", "status": "active"},
    {"name": "Felix Wagner", "email": "felix@atlas.example", "company": "Atlas Logistics", "status": "inactive"},
    {"name": "Grace Kim", "email": "grace@harbor.example", "company": "Harbor Dental", "status": "active"},
    {"name": "Henry Moss", "email": "henry@oakline.example", "company": "Oakline Furniture", "status": "active"},
    {"name": "Isla Brown", "email": "isla@solace.example", "company": "Solace Spa", "status": "lead"},
    {"name": "Jack Turner", "email": "jack@kinetic.example", "company": "Kinetic Fitness", "status": "active"},
    {"name": "Kara Singh", "email": "kara@saffron.example", "company": "Saffron Kitchen", "status": "active"},
    {"name": "Liam Walsh", "email": "liam@vertex.example", "company": "Vertex Architects", "status": "active"},
    {"name": "Mia Rossi", "email": "mia@bellavista.example", "company": "Bella Vista Hotels", "status": "lead"},
    {"name": "Noah Schmidt", "email": "noah@quanta.example", "company": "Quanta Labs", "status": "active"},
    {"name": "Ava Lopez", "email": "ava@petalpress.example", "company": "Petal Press", "status": "inactive"},
    {"name": "Oscar Lind", "email": "oscar@nordic.example", "company": "Nordic Sound", "status": "active"},
)

# Two of these are created per customer by the customer seeder
CUSTOMER_PROJECT_TYPES = (
    "Brand Identity",
    "Website Redesign",
    "Product Photography",
    "Launch Campaign",
    "Packaging Design",
    "Social Media Kit",
    "Lookbook Shoot",
    "Event Coverage",
)

# Additional projects created by the project seeder
ADDITIONAL_PROJECT_TYPES = (
    "Promo Video",
    "Annual Report",
    "Headshot Session",
    "Trade Show Booth",
    "Newsletter Template",
)
ADDITIONAL_PROJECT_COUNT = 20

PROJECT_BUDGETS = (1500.0, 2400.0, 3200.0, 4800.0, 6500.0, 9000.0)

SEED_EPOCH = datetime(2024, 1, 8, 9, 0, tzinfo=timezone.utc)

# =====================================================================
# Subscribers
# =====================================================================

SUBSCRIBER_FIRST_NAMES = (
    "anna", "bruno", "carla", "dmitri", "elena", "farid", "gemma",
    "hugo", "ines", "jonas", "keiko", "luca", "marta", "nils",
)
SUBSCRIBER_DOMAINS = ("example.com", "example.org", "example.net", "mail.example", "inbox.example")
SUBSCRIBER_SOURCES = ("website", "footer", "import", "event")
# Every n-th subscriber has unsubscribed again
UNSUBSCRIBE_EVERY = 7
