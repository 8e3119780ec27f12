"""
Static product catalog used to resolve line-item pricing.
"""

from typing import Dict, List, Optional

from graybay.schemas.catalog import Product, ProductCategory, ProductType


PRODUCT_CATALOG: List[Product] = [
    # Core services, one-time setup fees
    Product(
        id="website-template",
        name="Template Website",
        category=ProductCategory.CORE,
        type=ProductType.ONE_TIME,
        price=1500,
        description="Industry-specific website template with CMS backend",
        delivery_time="2-3 weeks",
        features=[
            "Pre-built pages (Home, About, Services, Contact)",
            "Industry-specific content placeholders",
            "Built-in contact forms",
            "Google Analytics integration",
            "Basic SEO setup",
            "Mobile responsive design",
        ],
    ),
    Product(
        id="chatbot-setup",
        name="AI Chatbot Setup",
        category=ProductCategory.CORE,
        type=ProductType.ONE_TIME,
        price=800,
        description="Pre-configured business chatbot with FAQ database",
        delivery_time="1-2 weeks",
        features=[
            "Business-type chatbot template",
            "Standard FAQ database",
            "Lead capture flows",
            "Appointment booking integration",
            "Handoff-to-human protocols",
        ],
    ),
    Product(
        id="local-seo-setup",
        name="Local SEO Setup",
        category=ProductCategory.CORE,
        type=ProductType.ONE_TIME,
        price=1000,
        description="Complete local SEO optimization and setup",
        delivery_time="2-3 weeks",
        features=[
            "Google My Business optimization",
            "Local citation submissions",
            "Review management system setup",
            "Local content optimization",
            "Monthly reporting dashboard",
        ],
    ),
    Product(
        id="analytics-dashboard",
        name="Business Analytics Dashboard",
        category=ProductCategory.CORE,
        type=ProductType.ONE_TIME,
        price=600,
        description="Custom analytics dashboard with business metrics",
        delivery_time="1-2 weeks",
        features=[
            "Google Analytics integration",
            "Social media monitoring",
            "Lead tracking system",
            "ROI reporting templates",
            "Automated report generation",
        ],
    ),
    Product(
        id="email-automation",
        name="Email Automation Setup",
        category=ProductCategory.CORE,
        type=ProductType.ONE_TIME,
        price=500,
        description="Automated email workflows and sequences",
        delivery_time="1 week",
        features=[
            "Email welcome sequences",
            "Appointment reminder systems",
            "Follow-up automation templates",
            "Lead nurturing workflows",
            "Performance tracking",
        ],
    ),
    # Monthly services, recurring fees
    Product(
        id="website-maintenance",
        name="Website Maintenance",
        category=ProductCategory.MONTHLY,
        type=ProductType.RECURRING,
        price=99,
        description="Monthly website updates, hosting, and maintenance",
        features=[
            "Hosting and security updates",
            "Content updates",
            "Performance monitoring",
            "Backup management",
            "Technical support",
        ],
    ),
    Product(
        id="chatbot-management",
        name="Chatbot Management",
        category=ProductCategory.MONTHLY,
        type=ProductType.RECURRING,
        price=100,
        description="Monthly chatbot optimization and management",
        features=[
            "Performance monitoring",
            "Response optimization",
            "FAQ updates",
            "Analytics reporting",
            "Technical support",
        ],
    ),
    Product(
        id="seo-management",
        name="SEO Management",
        category=ProductCategory.MONTHLY,
        type=ProductType.RECURRING,
        price=300,
        description="Ongoing SEO optimization and reporting",
        features=[
            "Monthly optimization",
            "Performance reports",
            "Keyword monitoring",
            "Competitor analysis",
            "Strategy adjustments",
        ],
    ),
    Product(
        id="dashboard-reports",
        name="Dashboard & Reports",
        category=ProductCategory.MONTHLY,
        type=ProductType.RECURRING,
        price=200,
        description="Monthly analytics reports and dashboard management",
        features=[
            "Custom report generation",
            "Performance analysis",
            "Dashboard maintenance",
            "Data visualization",
            "Strategic insights",
        ],
    ),
    Product(
        id="automation-management",
        name="Automation Management",
        category=ProductCategory.MONTHLY,
        type=ProductType.RECURRING,
        price=150,
        description="Monthly automation workflow optimization",
        features=[
            "Workflow optimization",
            "Performance monitoring",
            "Sequence updates",
            "A/B testing",
            "Reporting and analytics",
        ],
    ),
    # Add-ons
    Product(
        id="ecommerce-integration",
        name="E-commerce Integration",
        category=ProductCategory.ADDON,
        type=ProductType.ONE_TIME,
        price=800,
        description="Shopify/WooCommerce integration for online sales",
        delivery_time="1-2 weeks",
        features=[
            "Online store setup",
            "Payment processing",
            "Product catalog",
            "Order management",
            "Inventory tracking",
        ],
    ),
    Product(
        id="custom-design",
        name="Custom Design",
        category=ProductCategory.ADDON,
        type=ProductType.ONE_TIME,
        price=500,
        description="Custom design elements beyond template",
        delivery_time="1 week",
        features=[
            "Custom graphics",
            "Brand-specific design",
            "Layout modifications",
            "Color scheme customization",
            "Typography selection",
        ],
    ),
    Product(
        id="phone-integration",
        name="Phone Integration",
        category=ProductCategory.ADDON,
        type=ProductType.ONE_TIME,
        price=500,
        description="Phone system integration for chatbots",
        delivery_time="1 week",
        features=[
            "Phone number setup",
            "Call routing",
            "Voice integration",
            "SMS capabilities",
            "Call analytics",
        ],
    ),
    Product(
        id="review-management",
        name="Review Management",
        category=ProductCategory.ADDON,
        type=ProductType.RECURRING,
        price=200,
        description="Monthly review monitoring and management",
        features=[
            "Review monitoring",
            "Response management",
            "Reputation tracking",
            "Review solicitation",
            "Reporting and insights",
        ],
    ),
]

_BY_ID: Dict[str, Product] = {product.id: product for product in PRODUCT_CATALOG}


def get_product(product_id: Optional[str]) -> Optional[Product]:
    """Look up a catalog product by id."""
    if product_id is None:
        return None
    return _BY_ID.get(product_id)


def list_products(category: Optional[ProductCategory] = None) -> List[Product]:
    """List catalog products, optionally restricted to one category."""
    if category is None:
        return list(PRODUCT_CATALOG)
    return [product for product in PRODUCT_CATALOG if product.category == category]


def is_recurring(product_id: Optional[str]) -> bool:
    product = get_product(product_id)
    return product is not None and product.type == ProductType.RECURRING

