"""
Fixed demo data loaded into a fresh store.

Relations are expressed by position in these lists; the seeder maps
positions onto the ids the storage hands out.
"""
from realty.models import (
    AgentCreate, TestimonialCreate, AmenityCategoryCreate, NeighborhoodCreate
)

UNSPLASH = "https://images.unsplash.com/{photo}?ixlib=rb-4.0.3&auto=format&fit=crop&w=1170&q=80"

ADMIN_FULL_NAME = "David Wantula Makungu"
ADMIN_PHONE = "+260 97 000 0000"

# Owner is attached by the seeder once the admin user exists
SAMPLE_PROPERTIES = [
    {
        "title": "Luxury Penthouse",
        "description": "Spectacular penthouse with panoramic views of the Lusaka skyline",
        "price": 18500000,
        "location": "Kabulonga, Lusaka",
        "city": "Lusaka",
        "state": "Lusaka Province",
        "bedrooms": 4,
        "bathrooms": 3,
        "square_feet": 2850,
        "property_type": "Penthouse",
        "listing_type": "sell",
        "is_featured": True,
        "is_new": False,
        "image_url": UNSPLASH.format(photo="photo-1613490493576-7fde63acd811"),
        "latitude": -15.3875259,
        "longitude": 28.3228303,
    },
    {
        "title": "Modern Villa",
        "description": "Stunning modern villa with minimalist design and luxurious finishes",
        "price": 25000000,
        "location": "Ibex Hill, Lusaka",
        "city": "Lusaka",
        "state": "Lusaka Province",
        "bedrooms": 6,
        "bathrooms": 5,
        "square_feet": 5400,
        "property_type": "Villa",
        "listing_type": "sell",
        "is_featured": True,
        "is_new": False,
        "image_url": UNSPLASH.format(photo="photo-1583608205776-bfd35f0d9f83"),
        "latitude": -15.3521,
        "longitude": 28.4153,
    },
    {
        "title": "Zambezi Riverfront Estate",
        "description": "Breathtaking riverfront estate with private access to the Zambezi River",
        "price": 35000000,
        "location": "Livingstone",
        "city": "Livingstone",
        "state": "Southern Province",
        "bedrooms": 5,
        "bathrooms": 6,
        "square_feet": 6200,
        "property_type": "Estate",
        "listing_type": "sell",
        "is_featured": True,
        "is_new": True,
        "image_url": UNSPLASH.format(photo="photo-1512917774080-9991f1c4c750"),
        "latitude": -17.8516,
        "longitude": 25.8566,
    },
    {
        "title": "Contemporary Mansion",
        "description": "Impressive contemporary mansion with smart home technology throughout",
        "price": 42000000,
        "location": "Leopards Hill, Lusaka",
        "city": "Lusaka",
        "state": "Lusaka Province",
        "bedrooms": 7,
        "bathrooms": 8,
        "square_feet": 9800,
        "property_type": "Mansion",
        "listing_type": "sell",
        "is_featured": False,
        "is_new": True,
        "image_url": UNSPLASH.format(photo="photo-1600607687939-ce8a6c25118c"),
        "latitude": -15.4112,
        "longitude": 28.3370,
    },
    {
        "title": "Luxury City Apartment",
        "description": "Beautifully designed luxury apartment in the heart of Lusaka's business district",
        "price": 45000,
        "location": "Cairo Road, Lusaka",
        "city": "Lusaka",
        "state": "Lusaka Province",
        "bedrooms": 3,
        "bathrooms": 2,
        "square_feet": 1800,
        "property_type": "Apartment",
        "listing_type": "rent",
        "is_featured": False,
        "is_new": False,
        "image_url": UNSPLASH.format(photo="photo-1625602812206-5ec545ca1231"),
        "latitude": -15.4174,
        "longitude": 28.2876,
    },
    {
        "title": "Safari Lodge Investment",
        "description": "Commercial safari lodge with stunning views of the wildlife and natural landscape",
        "price": 28500000,
        "location": "South Luangwa National Park",
        "city": "Mfuwe",
        "state": "Eastern Province",
        "bedrooms": 12,
        "bathrooms": 14,
        "square_feet": 8500,
        "property_type": "Commercial",
        "listing_type": "sell",
        "is_featured": False,
        "is_new": False,
        "image_url": UNSPLASH.format(photo="photo-1605276374104-dee2a0ed3cd6"),
        "latitude": -13.1467,
        "longitude": 31.7865,
    },
]

SAMPLE_AGENTS = [
    AgentCreate(
        name="David Wantula Makungu",
        title="Principal Agent & Owner",
        bio="With over 15 years of experience in Zambian real estate, specializing in luxury properties across major cities.",
        image_url=UNSPLASH.format(photo="photo-1560250097-0b93528c311a"),
        instagram="davidmakungu",
        linkedin="david-makungu",
        email="david@realtyestate.com",
    ),
    AgentCreate(
        name="Natasha Mwansa",
        title="International Properties",
        bio="Specializing in connecting international investors with premium Zambian real estate opportunities.",
        image_url=UNSPLASH.format(photo="photo-1573496359142-b8d87734a5a2"),
        instagram="natashamwansa",
        linkedin="natasha-mwansa",
        email="natasha@realtyestate.com",
    ),
    AgentCreate(
        name="Mulenga Chipimo",
        title="Investment Advisor",
        bio="Former Bank of Zambia financial analyst helping clients build valuable real estate portfolios across Zambia.",
        image_url=UNSPLASH.format(photo="photo-1519085360753-af0119f7cbe7"),
        instagram="mulengachipimo",
        linkedin="mulenga-chipimo",
        email="mulenga@realtyestate.com",
    ),
    AgentCreate(
        name="Chilufya Banda",
        title="Commercial Property Expert",
        bio="Specialized knowledge of commercial developments in Lusaka and the Copperbelt regions.",
        image_url=UNSPLASH.format(photo="photo-1551836022-d5d88e9218df"),
        instagram="chilufyabanda",
        linkedin="chilufya-banda",
        email="chilufya@realtyestate.com",
    ),
]

SAMPLE_TESTIMONIALS = [
    TestimonialCreate(
        quote="Realty Estate provided exceptional service in helping us find our dream home in Lusaka.",
        name="Mutale Kapaso",
        location="Lusaka, Zambia",
        rating=5,
        image_url=UNSPLASH.format(photo="photo-1580489944761-15a19d654956"),
    ),
    TestimonialCreate(
        quote="As an international investor, I was impressed by their expertise in the Zambian market.",
        name="James Phiri",
        location="London, UK (Zambian expatriate)",
        rating=5,
        image_url=UNSPLASH.format(photo="photo-1507003211169-0a1dd7228f2d"),
    ),
    TestimonialCreate(
        quote="Exclusive access to off-market listings let us find a Zambezi riverfront property before it went public.",
        name="Bwalya & Namwinga Tembo",
        location="Livingstone, Zambia",
        rating=5,
        image_url=UNSPLASH.format(photo="photo-1529626455594-4ff0802cfb7e"),
    ),
]

SAMPLE_AMENITY_CATEGORIES = [
    AmenityCategoryCreate(name="Schools", icon="school"),
    AmenityCategoryCreate(name="Healthcare", icon="hospital"),
    AmenityCategoryCreate(name="Shopping", icon="shopping-bag"),
    AmenityCategoryCreate(name="Restaurants", icon="utensils"),
    AmenityCategoryCreate(name="Parks & Recreation", icon="tree"),
]

SAMPLE_NEIGHBORHOODS = [
    NeighborhoodCreate(
        name="Kabulonga",
        city="Lusaka",
        description="Leafy, upmarket residential suburb close to international schools and embassies.",
        safety_rating=9,
        walkability_score=62,
        school_rating=9,
        image_url=UNSPLASH.format(photo="photo-1580587771525-78b9dba3b914"),
        latitude=-15.4030,
        longitude=28.3360,
    ),
    NeighborhoodCreate(
        name="Ibex Hill",
        city="Lusaka",
        description="Quiet hillside area with large plots and modern villas.",
        safety_rating=8,
        walkability_score=45,
        school_rating=8,
        image_url=UNSPLASH.format(photo="photo-1564013799919-ab600027ffc6"),
        latitude=-15.4280,
        longitude=28.3750,
    ),
    NeighborhoodCreate(
        name="Central Business District",
        city="Lusaka",
        description="Commercial heart of the capital around Cairo Road.",
        safety_rating=6,
        walkability_score=85,
        school_rating=6,
        image_url=UNSPLASH.format(photo="photo-1486406146926-c627a92ad1ab"),
        latitude=-15.4167,
        longitude=28.2833,
    ),
    NeighborhoodCreate(
        name="Livingstone Town",
        city="Livingstone",
        description="Tourism capital near Victoria Falls and the Zambezi River.",
        safety_rating=7,
        walkability_score=70,
        school_rating=7,
        image_url=UNSPLASH.format(photo="photo-1516426122078-c23e76319801"),
        latitude=-17.8519,
        longitude=25.8544,
    ),
]

# (category index, fields)
SAMPLE_AMENITIES = [
    (0, dict(
        name="International School of Lusaka",
        address="Leopards Hill Road, Lusaka",
        description="Private international day school.",
        website="https://www.isl.edu.zm",
        latitude=-15.4125,
        longitude=28.3440,
    )),
    (1, dict(
        name="University Teaching Hospital",
        address="Nationalist Road, Lusaka",
        description="Largest referral hospital in Zambia.",
        latitude=-15.4300,
        longitude=28.3140,
    )),
    (2, dict(
        name="Arcades Shopping Mall",
        address="Great East Road, Lusaka",
        latitude=-15.4000,
        longitude=28.3230,
    )),
    (2, dict(
        name="Manda Hill Mall",
        address="Great East Road, Lusaka",
        latitude=-15.3960,
        longitude=28.3070,
    )),
    (3, dict(
        name="Cairo Road Eatery",
        address="Cairo Road, Lusaka",
        latitude=-15.4180,
        longitude=28.2840,
    )),
    (4, dict(
        name="Victoria Falls",
        address="Mosi-oa-Tunya National Park, Livingstone",
        description="One of the largest waterfalls in the world.",
        latitude=-17.9243,
        longitude=25.8572,
    )),
    (1, dict(
        name="Livingstone Central Hospital",
        address="Akapelwa Street, Livingstone",
        latitude=-17.8490,
        longitude=25.8610,
    )),
]

# (property index, neighborhood index)
PROPERTY_NEIGHBORHOOD_LINKS = [
    (0, 0),
    (1, 1),
    (2, 3),
    (3, 0),
    (3, 1),
    (4, 2),
]

# (neighborhood index, amenity index, distance in km)
NEIGHBORHOOD_AMENITY_LINKS = [
    (0, 0, 1.2),
    (0, 2, 1.5),
    (0, 1, 3.0),
    (1, 0, 3.5),
    (1, 2, 5.8),
    (2, 4, 0.1),
    (2, 3, 2.7),
    (2, 1, 2.0),
    (3, 5, 8.0),
    (3, 6, 0.7),
]
