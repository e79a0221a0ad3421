"""Rule-based recipe sections.

Archetype-specific additions live in lookup tables keyed by archetype, so a
new archetype template is a data change.
"""

from roadforge.models.analysis import Analysis, TechCategory
from roadforge.models.project import ProjectInput
from roadforge.models.recipe import (
    ApiEndpoint,
    Component,
    DatabaseSchema,
    DeploymentGuide,
    DirectorySpec,
    FileSpec,
    ImplementationPhase,
    Table,
    TableField,
    TechnicalArchitecture,
)
from roadforge.pipeline.stages.features import AUTHENTICATION, FILE_UPLOAD, PAYMENTS, REAL_TIME

ECOMMERCE = "E-commerce Platform"
TASK_MANAGEMENT = "Task Management System"


def _frontend(analysis: Analysis) -> str:
    return analysis.technology_for(TechCategory.FRONTEND, "React")


def _backend(analysis: Analysis) -> str:
    return analysis.technology_for(TechCategory.BACKEND, "Node.js")


def _database(analysis: Analysis) -> str:
    return analysis.technology_for(TechCategory.DATABASE, "PostgreSQL")


def _is_postgres(analysis: Analysis) -> bool:
    return "PostgreSQL" in _database(analysis)


def _fresh(items):
    """Deep copies of table entries so results never share them."""
    return [item.model_copy(deep=True) for item in items]


# --- architecture -----------------------------------------------------------

FEATURE_COMPONENTS = {
    REAL_TIME: Component(
        name="Real-time Engine",
        purpose="WebSocket connections for live updates",
        technologies=["Socket.io", "WebSocket Protocol", "Event Broadcasting"],
    ),
    PAYMENTS: Component(
        name="Payment Processing",
        purpose="Secure payment handling and transaction management",
        technologies=["Stripe API", "Webhook Processing", "PCI Compliance"],
    ),
}


def overview_text(project: ProjectInput, analysis: Analysis) -> str:
    """One-paragraph architecture overview."""
    features = ", ".join(f.feature.lower() for f in analysis.features) or "core"
    return (
        f"{project.name} follows a modern {_frontend(analysis)} frontend with "
        f"{_backend(analysis)} backend architecture. The system is designed for "
        f"{analysis.complexity.overall.value} developers and implements {features} "
        "functionality."
    )


def build_architecture(project: ProjectInput, analysis: Analysis) -> TechnicalArchitecture:
    frontend, backend, database = _frontend(analysis), _backend(analysis), _database(analysis)
    components = [
        Component(
            name="Frontend Application",
            purpose=f"{frontend}-based user interface for {project.name}",
            technologies=[frontend, "CSS3", "JavaScript/TypeScript"],
        ),
        Component(
            name="Backend API",
            purpose=f"{backend} RESTful API server handling business logic",
            technologies=[backend, "JWT Authentication"],
        ),
        Component(
            name="Database Layer",
            purpose=f"{database} database for persistent data storage",
            technologies=[database, "Database Migrations", "Query Optimization"],
        ),
    ]
    components.extend(
        _fresh(
            component
            for feature, component in FEATURE_COMPONENTS.items()
            if analysis.has_feature(feature)
        )
    )

    payment_security = (
        "PCI-compliant payment processing"
        if analysis.has_feature(PAYMENTS)
        else "secure data handling"
    )
    return TechnicalArchitecture(
        overview=overview_text(project, analysis),
        components=components,
        data_flow=(
            f"Client requests → {frontend} Router → API Endpoints → {backend} Controllers → "
            f"{database} Queries → Response Processing → Client Updates"
        ),
        security=(
            "Implement JWT authentication, HTTPS encryption, input validation, rate "
            f"limiting, and {payment_security}."
        ),
    )


# --- file structure ---------------------------------------------------------

ARCHETYPE_PAGES = {
    ECOMMERCE: [
        FileSpec(filename="Products.jsx", purpose="Product listing page", dependencies=["react", "api"]),
        FileSpec(
            filename="ProductDetail.jsx",
            purpose="Individual product page",
            dependencies=["react", "router"],
        ),
    ],
    TASK_MANAGEMENT: [
        FileSpec(
            filename="Dashboard.jsx",
            purpose="Task dashboard",
            dependencies=["react", "state-management"],
        ),
        FileSpec(filename="TaskBoard.jsx", purpose="Kanban task board", dependencies=["react", "drag-drop"]),
    ],
}

ARCHETYPE_MODELS = {
    ECOMMERCE: [
        FileSpec(filename="Product.js", purpose="Product data model", dependencies=["database"]),
        FileSpec(filename="Order.js", purpose="Order management model", dependencies=["database", "User"]),
    ],
    TASK_MANAGEMENT: [
        FileSpec(filename="Task.js", purpose="Task data model", dependencies=["database", "User"]),
        FileSpec(filename="Project.js", purpose="Project organization model", dependencies=["database"]),
    ],
}

ARCHETYPE_CONTROLLERS = {
    ECOMMERCE: [
        FileSpec(filename="productController.js", purpose="Product management logic", dependencies=["models"]),
        FileSpec(
            filename="orderController.js",
            purpose="Order processing logic",
            dependencies=["models", "payment"],
        ),
    ],
}


def build_file_structure(project: ProjectInput, analysis: Analysis) -> list[DirectorySpec]:
    archetype = analysis.project_type.archetype
    is_next = "Next.js" in _frontend(analysis)

    components = [
        FileSpec(filename="Header.jsx", purpose="Navigation header component", dependencies=["react"]),
        FileSpec(filename="Footer.jsx", purpose="Page footer component", dependencies=["react"]),
    ]
    if analysis.has_feature(AUTHENTICATION):
        components += [
            FileSpec(filename="LoginForm.jsx", purpose="User authentication form", dependencies=["react", "axios"]),
            FileSpec(filename="UserProfile.jsx", purpose="User profile display", dependencies=["react"]),
        ]

    return [
        DirectorySpec(
            directory="/",
            purpose="Project root directory",
            files=[
                FileSpec(filename="package.json", purpose="Node.js dependencies and scripts"),
                FileSpec(filename="README.md", purpose=f"{project.name} project documentation"),
                FileSpec(filename=".env.example", purpose="Environment variables template"),
                FileSpec(filename=".gitignore", purpose="Git ignore patterns"),
            ],
        ),
        DirectorySpec(directory="/src", purpose="Source code directory"),
        DirectorySpec(directory="/src/components", purpose="Reusable React components", files=components),
        DirectorySpec(
            directory="/src/pages",
            purpose="Next.js pages" if is_next else "Application views",
            files=[
                FileSpec(filename="Home.jsx", purpose=f"{project.name} main page", dependencies=["react"]),
                *_fresh(ARCHETYPE_PAGES.get(archetype, [])),
            ],
        ),
        DirectorySpec(
            directory="/server",
            purpose="Backend server code",
            files=[
                FileSpec(filename="index.js", purpose="Express server entry point", dependencies=["express", "cors"]),
                FileSpec(filename="routes.js", purpose="API route definitions", dependencies=["express", "controllers"]),
                FileSpec(filename="middleware.js", purpose="Custom middleware functions", dependencies=["express"]),
            ],
        ),
        DirectorySpec(
            directory="/server/models",
            purpose="Database models and schemas",
            files=[
                FileSpec(filename="User.js", purpose="User data model", dependencies=["database"]),
                *_fresh(ARCHETYPE_MODELS.get(archetype, [])),
            ],
        ),
        DirectorySpec(
            directory="/server/controllers",
            purpose="Business logic controllers",
            files=[
                FileSpec(filename="authController.js", purpose="Authentication logic", dependencies=["models", "jwt"]),
                *_fresh(ARCHETYPE_CONTROLLERS.get(archetype, [])),
            ],
        ),
    ]


# --- database schema --------------------------------------------------------


def _id_field(description: str, postgres: bool) -> TableField:
    return TableField(
        name="id",
        type="SERIAL PRIMARY KEY" if postgres else "INTEGER PRIMARY KEY",
        constraints="NOT NULL",
        description=description,
    )


def _users_table(postgres: bool) -> Table:
    return Table(
        name="users",
        purpose="Store user account information",
        fields=[
            _id_field("Unique user identifier", postgres),
            TableField(name="email", type="VARCHAR(255)", constraints="UNIQUE NOT NULL", description="User email address"),
            TableField(name="password_hash", type="VARCHAR(255)", constraints="NOT NULL", description="Encrypted password"),
            TableField(name="username", type="VARCHAR(100)", constraints="UNIQUE", description="Display name"),
            TableField(
                name="created_at",
                type="TIMESTAMP",
                constraints="DEFAULT CURRENT_TIMESTAMP",
                description="Account creation date",
            ),
            TableField(
                name="updated_at",
                type="TIMESTAMP",
                constraints="DEFAULT CURRENT_TIMESTAMP",
                description="Last profile update",
            ),
        ],
        relationships=["Has many sessions", "Has many preferences"],
    )


def _ecommerce_tables(postgres: bool) -> list[Table]:
    return [
        Table(
            name="products",
            purpose="Store product catalog information",
            fields=[
                _id_field("Product identifier", postgres),
                TableField(name="name", type="VARCHAR(200)", constraints="NOT NULL", description="Product name"),
                TableField(name="description", type="TEXT", description="Product description"),
                TableField(name="price", type="DECIMAL(10,2)", constraints="NOT NULL", description="Product price"),
                TableField(name="category", type="VARCHAR(100)", constraints="NOT NULL", description="Product category"),
                TableField(name="inventory_count", type="INTEGER", constraints="DEFAULT 0", description="Available quantity"),
                TableField(name="sku", type="VARCHAR(50)", constraints="UNIQUE", description="Stock keeping unit"),
            ],
            relationships=["Belongs to category", "Has many order_items"],
        ),
        Table(
            name="orders",
            purpose="Store customer order information",
            fields=[
                _id_field("Order identifier", postgres),
                TableField(
                    name="user_id",
                    type="INTEGER",
                    constraints="FOREIGN KEY REFERENCES users(id)",
                    description="Customer reference",
                ),
                TableField(name="total_amount", type="DECIMAL(10,2)", constraints="NOT NULL", description="Order total"),
                TableField(name="status", type="VARCHAR(50)", constraints="DEFAULT 'pending'", description="Order status"),
                TableField(name="shipping_address", type="TEXT", description="Delivery address"),
            ],
            relationships=["Belongs to user", "Has many order_items"],
        ),
    ]


def _task_tables(postgres: bool) -> list[Table]:
    return [
        Table(
            name="projects",
            purpose="Store project information",
            fields=[
                _id_field("Project identifier", postgres),
                TableField(name="name", type="VARCHAR(200)", constraints="NOT NULL", description="Project name"),
                TableField(name="description", type="TEXT", description="Project description"),
                TableField(
                    name="owner_id",
                    type="INTEGER",
                    constraints="FOREIGN KEY REFERENCES users(id)",
                    description="Project owner",
                ),
                TableField(
                    name="created_at",
                    type="TIMESTAMP",
                    constraints="DEFAULT CURRENT_TIMESTAMP",
                    description="Creation date",
                ),
            ],
            relationships=["Belongs to user", "Has many tasks"],
        ),
        Table(
            name="tasks",
            purpose="Store task information",
            fields=[
                _id_field("Task identifier", postgres),
                TableField(name="title", type="VARCHAR(200)", constraints="NOT NULL", description="Task title"),
                TableField(name="description", type="TEXT", description="Task details"),
                TableField(
                    name="project_id",
                    type="INTEGER",
                    constraints="FOREIGN KEY REFERENCES projects(id)",
                    description="Parent project",
                ),
                TableField(
                    name="assigned_to",
                    type="INTEGER",
                    constraints="FOREIGN KEY REFERENCES users(id)",
                    description="Assigned user",
                ),
                TableField(name="status", type="VARCHAR(50)", constraints="DEFAULT 'todo'", description="Task status"),
                TableField(name="priority", type="VARCHAR(20)", constraints="DEFAULT 'medium'", description="Task priority"),
                TableField(name="due_date", type="TIMESTAMP", description="Task deadline"),
            ],
            relationships=["Belongs to project", "Assigned to user"],
        ),
    ]


ARCHETYPE_TABLES = {
    ECOMMERCE: _ecommerce_tables,
    TASK_MANAGEMENT: _task_tables,
}

ARCHETYPE_INDEXES = {
    ECOMMERCE: [
        "CREATE INDEX idx_products_category ON products(category)",
        "CREATE INDEX idx_orders_user ON orders(user_id)",
        "CREATE INDEX idx_orders_status ON orders(status)",
    ],
    TASK_MANAGEMENT: [
        "CREATE INDEX idx_tasks_project ON tasks(project_id)",
        "CREATE INDEX idx_tasks_assigned ON tasks(assigned_to)",
        "CREATE INDEX idx_tasks_status ON tasks(status)",
    ],
}


def build_database_schema(analysis: Analysis) -> DatabaseSchema:
    archetype = analysis.project_type.archetype
    postgres = _is_postgres(analysis)

    tables = [_users_table(postgres)]
    extra_tables = ARCHETYPE_TABLES.get(archetype)
    if extra_tables:
        tables += extra_tables(postgres)

    return DatabaseSchema(
        database="PostgreSQL" if postgres else "SQLite",
        tables=tables,
        indexes=[
            "CREATE INDEX idx_users_email ON users(email)",
            "CREATE INDEX idx_users_username ON users(username)",
            *ARCHETYPE_INDEXES.get(archetype, []),
        ],
    )


# --- API endpoints ----------------------------------------------------------

BASE_ENDPOINTS = [
    ApiEndpoint(
        endpoint="/api/auth/register",
        method="POST",
        purpose="Create new user account",
        request_body="{ email, password, username }",
        response_format="{ success: boolean, user: object, token: string }",
        authentication=False,
    ),
    ApiEndpoint(
        endpoint="/api/auth/login",
        method="POST",
        purpose="Authenticate existing user",
        request_body="{ email, password }",
        response_format="{ success: boolean, user: object, token: string }",
        authentication=False,
    ),
    ApiEndpoint(
        endpoint="/api/user/profile",
        method="GET",
        purpose="Get current user profile",
        response_format="{ user: object, preferences: object }",
        authentication=True,
    ),
]

ARCHETYPE_ENDPOINTS = {
    ECOMMERCE: [
        ApiEndpoint(
            endpoint="/api/products",
            method="GET",
            purpose="Get product listings with filtering",
            response_format="{ products: array, pagination: object }",
            authentication=False,
            rate_limiting="100 requests per minute",
        ),
        ApiEndpoint(
            endpoint="/api/products",
            method="POST",
            purpose="Create new product (admin only)",
            request_body="{ name, description, price, category, inventory_count }",
            response_format="{ success: boolean, product: object }",
            authentication=True,
        ),
        ApiEndpoint(
            endpoint="/api/orders",
            method="POST",
            purpose="Create new order",
            request_body="{ items: array, shipping_address: string }",
            response_format="{ success: boolean, order: object, payment_intent: string }",
            authentication=True,
        ),
    ],
    TASK_MANAGEMENT: [
        ApiEndpoint(
            endpoint="/api/projects",
            method="GET",
            purpose="Get user projects",
            response_format="{ projects: array }",
            authentication=True,
        ),
        ApiEndpoint(
            endpoint="/api/projects",
            method="POST",
            purpose="Create new project",
            request_body="{ name, description }",
            response_format="{ success: boolean, project: object }",
            authentication=True,
        ),
        ApiEndpoint(
            endpoint="/api/tasks",
            method="GET",
            purpose="Get tasks with filtering",
            response_format="{ tasks: array, filters: object }",
            authentication=True,
        ),
        ApiEndpoint(
            endpoint="/api/tasks",
            method="POST",
            purpose="Create new task",
            request_body="{ title, description, project_id, assigned_to, due_date }",
            response_format="{ success: boolean, task: object }",
            authentication=True,
        ),
    ],
}


def build_api_endpoints(analysis: Analysis) -> list[ApiEndpoint]:
    return _fresh([*BASE_ENDPOINTS, *ARCHETYPE_ENDPOINTS.get(analysis.project_type.archetype, [])])


# --- implementation phases --------------------------------------------------

FOUNDATION_PHASE = ImplementationPhase(
    phase="Project Foundation",
    duration="3-5 days",
    tasks=[
        "Set up development environment",
        "Initialize project structure",
        "Configure build tools and dependencies",
        "Set up version control and CI/CD",
    ],
    deliverables=[
        "Working development setup",
        "Project repository with initial structure",
        "Build and deployment pipeline",
    ],
)

AUTH_PHASE = ImplementationPhase(
    phase="Authentication & User Management",
    duration="5-7 days",
    tasks=[
        "Implement user registration",
        "Build login/logout functionality",
        "Create user profile management",
        "Set up JWT authentication",
    ],
    deliverables=[
        "Complete authentication system",
        "User management interface",
        "Security middleware",
    ],
)

ARCHETYPE_PHASES = {
    ECOMMERCE: [
        ImplementationPhase(
            phase="Product Management",
            duration="7-10 days",
            tasks=[
                "Create product catalog system",
                "Build product listing interface",
                "Implement search and filtering",
                "Add product detail pages",
            ],
            deliverables=["Product management system", "Product browsing interface", "Search functionality"],
        ),
        ImplementationPhase(
            phase="Shopping Cart & Checkout",
            duration="8-12 days",
            tasks=[
                "Implement shopping cart functionality",
                "Integrate payment processing",
                "Build checkout flow",
                "Add order management",
            ],
            deliverables=[
                "Complete e-commerce functionality",
                "Payment processing system",
                "Order management interface",
            ],
        ),
    ],
    TASK_MANAGEMENT: [
        ImplementationPhase(
            phase="Project & Task Management",
            duration="8-12 days",
            tasks=[
                "Create project management system",
                "Build task creation and editing",
                "Implement task assignment and tracking",
                "Add project collaboration features",
            ],
            deliverables=["Project management interface", "Task tracking system", "Team collaboration features"],
        ),
        ImplementationPhase(
            phase="Dashboard & Analytics",
            duration="5-8 days",
            tasks=[
                "Build project dashboard",
                "Add progress tracking",
                "Implement reporting features",
                "Create data visualization",
            ],
            deliverables=["Project dashboard", "Progress tracking system", "Analytics and reporting"],
        ),
    ],
}

RELEASE_PHASE = ImplementationPhase(
    phase="Testing & Deployment",
    duration="3-5 days",
    tasks=[
        "Comprehensive testing suite",
        "Performance optimization",
        "Security audit",
        "Production deployment",
    ],
    deliverables=[
        "Tested and optimized application",
        "Security-audited codebase",
        "Live production deployment",
    ],
)


def _core_features_phase(analysis: Analysis) -> ImplementationPhase | None:
    """Generic feature phase for archetypes without a template."""
    features = [f for f in analysis.features if f.feature != AUTHENTICATION]
    if not features:
        return None
    hours = sum(f.estimated_hours for f in features)
    low = max(1, round(hours / 6))
    return ImplementationPhase(
        phase="Core Features",
        duration=f"{low}-{low + max(1, low // 2)} days",
        tasks=[f"Implement {f.feature.lower()}" for f in features],
        deliverables=[f"Working {f.feature.lower()}" for f in features],
    )


def build_implementation_phases(analysis: Analysis) -> list[ImplementationPhase]:
    """Ordered phases, numbered and chained by dependency."""
    phases = [FOUNDATION_PHASE, AUTH_PHASE]
    template = ARCHETYPE_PHASES.get(analysis.project_type.archetype)
    if template:
        phases += template
    else:
        core = _core_features_phase(analysis)
        if core:
            phases.append(core)
    phases.append(RELEASE_PHASE)

    numbered = []
    for index, phase in enumerate(phases, 1):
        numbered.append(
            phase.model_copy(
                deep=True,
                update={
                    "phase": f"Phase {index}: {phase.phase}",
                    "dependencies": [f"Phase {index - 1}"] if index > 1 else [],
                },
            )
        )
    return numbered


# --- deployment -------------------------------------------------------------


def build_deployment_guide(analysis: Analysis) -> DeploymentGuide:
    payments = analysis.has_feature(PAYMENTS)
    requirements = [
        "Node.js 18+ runtime environment",
        f"{_database(analysis)} database server",
        "SSL certificate for HTTPS",
        "Domain name and DNS configuration",
    ]
    if payments:
        requirements.append("Stripe account and API keys")
    if analysis.has_feature(FILE_UPLOAD):
        requirements.append("Cloud storage service (AWS S3/Cloudinary)")

    configuration = ["Environment variables: DATABASE_URL, JWT_SECRET, NODE_ENV=production"]
    if payments:
        configuration.append("Stripe API keys: STRIPE_SECRET_KEY, STRIPE_PUBLIC_KEY")
    configuration += [
        "CORS configuration for production domain",
        "Rate limiting and security headers",
        "Database connection pooling",
        "Log management and monitoring setup",
    ]

    return DeploymentGuide(
        environment="Production Deployment",
        requirements=requirements,
        steps=[
            "Clone repository to production server",
            "Install dependencies with npm install --production",
            "Set up environment variables (.env file)",
            "Run database migrations",
            "Build frontend assets",
            "Configure reverse proxy (Nginx)",
            "Set up SSL certificates",
            "Start application with PM2 or similar process manager",
        ],
        configuration=configuration,
    )
