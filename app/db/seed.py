"""Seed the store with the admin account and the sample catalogue."""
import logging
from app.core.config import Settings, settings
from app.core.security import get_password_hash
from app.db.mock_db import MemoryStore

logger = logging.getLogger(__name__)

CATEGORIES = [
    {"name": "Art & Crafts", "color": "#3B82F6", "text_color": "#1E40AF", "bg_color": "#DBEAFE"},
    {"name": "Cooking", "color": "#F59E0B", "text_color": "#92400E", "bg_color": "#FEF3C7"},
    {"name": "Fitness", "color": "#10B981", "text_color": "#065F46", "bg_color": "#D1FAE5"},
    {"name": "Technology", "color": "#8B5CF6", "text_color": "#5B21B6", "bg_color": "#EDE9FE"},
    {"name": "Languages", "color": "#EC4899", "text_color": "#9D174D", "bg_color": "#FCE7F3"},
    {"name": "Music", "color": "#EF4444", "text_color": "#991B1B", "bg_color": "#FEE2E2"},
]

LOCATIONS = [
    {"name": "Downtown Studio", "address": "123 Main St, Downtown"},
    {"name": "Culinary Institute", "address": "456 Chef Way, North End"},
    {"name": "East Side Wellness Center", "address": "789 Healthy Blvd, East Side"},
    {"name": "Tech Hub Coworking", "address": "321 Digital Lane, Innovation District"},
    {"name": "City Park & Art Center", "address": "654 Nature Path, Green District"},
    {"name": "Waterfront Gallery", "address": "987 Ocean View, Harborside"},
]

# Prices are in cents.
CLASSES = [
    {
        "title": "Pottery Workshop for Beginners",
        "description": "Learn the basics of pottery in this hands-on workshop perfect for beginners. All materials included.",
        "price": 6500,
        "price_unit": "per person",
        "total_spots": 12,
        "available_spots": 8,
        "image_url": "https://images.unsplash.com/photo-1544531585-9847b68c8c86?auto=format&fit=crop&w=500&q=80",
        "date": "Wed, June 15",
        "time": "6:00 PM - 8:00 PM",
        "category_id": 1,
        "location_id": 1,
    },
    {
        "title": "Seasonal Farm-to-Table Cooking",
        "description": "Learn to prepare delicious meals using fresh, seasonal ingredients from local farms. Includes dinner!",
        "price": 8500,
        "price_unit": "per person",
        "total_spots": 10,
        "available_spots": 2,
        "image_url": "https://images.unsplash.com/photo-1512621776951-a57141f2eefd?auto=format&fit=crop&w=500&q=80",
        "date": "Sat, June 18",
        "time": "2:00 PM - 5:00 PM",
        "category_id": 2,
        "location_id": 2,
    },
    {
        "title": "Yoga for Stress Relief",
        "description": "A gentle yoga class focused on stress relief and relaxation. Perfect for all experience levels.",
        "price": 1500,
        "price_unit": "per session",
        "total_spots": 20,
        "available_spots": 12,
        "image_url": "https://images.unsplash.com/photo-1517836357463-d25dfeac3438?auto=format&fit=crop&w=500&q=80",
        "date": "Every Monday",
        "time": "7:00 PM - 8:00 PM",
        "category_id": 3,
        "location_id": 3,
    },
    {
        "title": "Intro to Web Development",
        "description": "Learn the basics of HTML, CSS, and JavaScript in this workshop designed for complete beginners.",
        "price": 12000,
        "price_unit": "per person",
        "total_spots": 15,
        "available_spots": 0,
        "image_url": "https://images.unsplash.com/photo-1581092918056-0c4c3acd3789?auto=format&fit=crop&w=500&q=80",
        "date": "Sat-Sun, June 25-26",
        "time": "10:00 AM - 4:00 PM",
        "category_id": 4,
        "location_id": 4,
    },
    {
        "title": "Urban Sketching Basics",
        "description": "Learn to sketch urban scenes with simple techniques. All skill levels welcome. Materials provided.",
        "price": 4500,
        "price_unit": "per person",
        "total_spots": 12,
        "available_spots": 10,
        "image_url": "https://images.unsplash.com/photo-1535131749006-b7f58c99034b?auto=format&fit=crop&w=500&q=80",
        "date": "Sun, June 19",
        "time": "9:00 AM - 12:00 PM",
        "category_id": 1,
        "location_id": 5,
    },
    {
        "title": "Photography Fundamentals",
        "description": "Master the basics of composition, lighting and camera settings. Bring your own camera.",
        "price": 8000,
        "price_unit": "per person",
        "total_spots": 8,
        "available_spots": 3,
        "image_url": "https://images.unsplash.com/photo-1503428593586-e225b39bddfe?auto=format&fit=crop&w=500&q=80",
        "date": "Fri, June 24",
        "time": "1:00 PM - 4:00 PM",
        "category_id": 1,
        "location_id": 6,
    },
]

SERVICES = [
    {
        "name": "Web Design",
        "slug": "web-design",
        "description": "Responsive websites that look great on every device.",
        "icon": "layout",
        "detailed_description": "From wireframes to launch, we design and build fast, accessible sites tailored to your brand.",
    },
    {
        "name": "Branding",
        "slug": "branding",
        "description": "Logos, palettes and voice that make you memorable.",
        "icon": "pen-tool",
        "detailed_description": "We research your market and craft a complete identity system, delivered with usage guidelines.",
    },
    {
        "name": "Digital Marketing",
        "slug": "digital-marketing",
        "description": "Campaigns that turn visitors into customers.",
        "icon": "trending-up",
        "detailed_description": "Search, social and email campaigns planned around measurable goals and reported monthly.",
    },
]

PORTFOLIO_ITEMS = [
    {
        "title": "Bakery Storefront Relaunch",
        "description": "A new online ordering site for a neighbourhood bakery.",
        "image_url": "https://images.unsplash.com/photo-1509440159596-0249088772ff?auto=format&fit=crop&w=500&q=80",
        "client": "Rise & Crumb",
        "service_id": 1,
        "result": "Online orders up 140% in three months.",
        "testimonial": "Our customers love ordering ahead now.",
        "testimonial_author": "Dana Ruiz, Owner",
    },
    {
        "title": "Craft Brewery Identity",
        "description": "Full rebrand for a regional brewery's tenth anniversary.",
        "image_url": "https://images.unsplash.com/photo-1535958636474-b021ee887b13?auto=format&fit=crop&w=500&q=80",
        "client": "Hopline Brewing",
        "service_id": 2,
        "result": "Shelf placement in 40 new stores.",
    },
    {
        "title": "Clinic Lead Generation",
        "description": "Search and social campaigns for a physiotherapy clinic.",
        "image_url": "https://images.unsplash.com/photo-1576091160550-2173dba999ef?auto=format&fit=crop&w=500&q=80",
        "client": "Motion Physio",
        "service_id": 3,
        "result": "Cost per booking halved.",
    },
]

TEAM_MEMBERS = [
    {
        "name": "Priya Patel",
        "role": "Creative Director",
        "bio": "Fifteen years shaping brands for startups and nonprofits.",
        "image_url": "https://images.unsplash.com/photo-1494790108377-be9c29b29330?auto=format&fit=crop&w=300&q=80",
    },
    {
        "name": "Marcus Chen",
        "role": "Lead Developer",
        "bio": "Builds fast, accessible front ends and keeps the servers quiet.",
        "image_url": "https://images.unsplash.com/photo-1500648767791-00dcc994a43e?auto=format&fit=crop&w=300&q=80",
    },
]

TESTIMONIALS = [
    {
        "name": "Dana Ruiz",
        "company": "Rise & Crumb",
        "testimonial": "They understood our shop from the first meeting.",
    },
    {
        "name": "Tom Becker",
        "company": "Hopline Brewing",
        "testimonial": "The new identity finally matches the beer.",
    },
]

BLOG_POSTS = [
    {
        "title": "Five Signs Your Website Needs a Refresh",
        "slug": "five-signs-your-website-needs-a-refresh",
        "content": "Slow pages, dated visuals and confusing navigation all cost you customers...",
        "excerpt": "Is your site quietly turning visitors away?",
        "image_url": "https://images.unsplash.com/photo-1460925895917-afdab827c52f?auto=format&fit=crop&w=500&q=80",
        "author": "Marcus Chen",
        "category": "Web Design",
        "tags": ["design", "performance"],
    },
    {
        "title": "What a Brand Guide Should Contain",
        "slug": "what-a-brand-guide-should-contain",
        "content": "A brand guide keeps every touchpoint consistent...",
        "excerpt": "The pages that keep your identity consistent.",
        "image_url": "https://images.unsplash.com/photo-1561070791-2526d30994b5?auto=format&fit=crop&w=500&q=80",
        "author": "Priya Patel",
        "category": "Branding",
        "tags": ["branding"],
    },
]


def _warn_on_default_secrets() -> None:
    defaults = Settings.model_fields
    if settings.ADMIN_PASSWORD == defaults["ADMIN_PASSWORD"].default:
        logger.warning(
            "Admin user '%s' uses the default password; set ADMIN_PASSWORD",
            settings.ADMIN_USERNAME,
        )
    if settings.SECRET_KEY == defaults["SECRET_KEY"].default:
        logger.warning("Tokens are signed with the default SECRET_KEY; set SECRET_KEY")


def seed_data(store: MemoryStore, sample: bool = True) -> None:
    """Create the admin user and, if ``sample``, the demo catalogue."""
    _warn_on_default_secrets()
    if store.get_user_by_username(settings.ADMIN_USERNAME) is None:
        store.create_user({
            "username": settings.ADMIN_USERNAME,
            "password": get_password_hash(settings.ADMIN_PASSWORD),
            "is_admin": True,
        })
        logger.info("Seeded admin user '%s'", settings.ADMIN_USERNAME)

    if not sample or len(store.categories):
        return

    for category in CATEGORIES:
        store.categories.insert(category)
    for location in LOCATIONS:
        store.locations.insert(location)
    for cls in CLASSES:
        store.create_class(cls)
    for service in SERVICES:
        store.services.insert(service)
    for item in PORTFOLIO_ITEMS:
        store.create_portfolio_item(item)
    for member in TEAM_MEMBERS:
        store.team_members.insert(member)
    for testimonial in TESTIMONIALS:
        store.testimonials.insert(testimonial)
    for post in BLOG_POSTS:
        store.create_blog_post(post)

    logger.info(
        "Seeded %d categories, %d locations, %d classes, %d services, %d blog posts",
        len(CATEGORIES), len(LOCATIONS), len(CLASSES), len(SERVICES), len(BLOG_POSTS),
    )
