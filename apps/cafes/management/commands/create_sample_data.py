"""
Management command to create sample data for trying out the API.

Usage:
    python manage.py create_sample_data

This creates:
- 3 users (admin, alice, bob)
- A drink menu
- 6 cafés around Paris with opening hours and social links
- Reviews and favorites
"""

from django.core.management.base import BaseCommand
from django.db import transaction

from apps.accounts.models import User
from apps.cafes.models import Cafe, Drink, DrinkCategory, LatteType
from apps.cafes.services import create_cafe, create_drink
from apps.favorites.models import Favorite
from apps.favorites.services import add_favorite
from apps.reviews.models import Review
from apps.reviews.services import create_review


WEEKDAYS = ('monday', 'tuesday', 'wednesday', 'thursday', 'friday')

DRINKS = [
    ('Espresso', DrinkCategory.ESPRESSO, '☕'),
    ('Flat White', DrinkCategory.LATTE, '🥛'),
    ('Matcha Latte', DrinkCategory.LATTE, '🍵'),
    ('Chai Latte', DrinkCategory.LATTE, '🫖'),
    ('V60', DrinkCategory.FILTER, ''),
    ('Iced Latte', DrinkCategory.COLD, '🧊'),
]

CAFES = [
    {
        'name': 'Matcha Bar Rivoli',
        'address': '12 Rue de Rivoli, 75004 Paris',
        'latitude': 48.8556,
        'longitude': 2.3589,
        'latte_types': [LatteType.MATCHA, LatteType.ICED],
        'drinks': ['Matcha Latte', 'Iced Latte'],
        'hours': {
            **{day: {'open': '08:00', 'close': '19:00'} for day in WEEKDAYS},
            'saturday': {'open': '09:00', 'close': '20:00'},
            'sunday': 'closed',
        },
        'social': {'instagram': '@matchabar.rivoli'},
    },
    {
        'name': 'Chai Corner',
        'address': 'Place du Tertre, 75018 Paris',
        'latitude': 48.8867,
        'longitude': 2.3408,
        'latte_types': [LatteType.CHAI, LatteType.CAFE],
        'drinks': ['Chai Latte', 'Espresso'],
        'hours': {day: '10:00-18:00' for day in WEEKDAYS},
        'social': {'website': 'https://chaicorner.example.com'},
    },
    {
        'name': 'Le Comptoir Filtre',
        'address': '5 Rue Oberkampf, 75011 Paris',
        'latitude': 48.8649,
        'longitude': 2.3700,
        'latte_types': [LatteType.CAFE],
        'drinks': ['Espresso', 'Flat White', 'V60'],
        'hours': {
            **{day: {'open': '07:30', 'close': '17:00'} for day in WEEKDAYS},
            'saturday': {'open': '09:00', 'close': '17:00'},
            'sunday': {'open': '09:00', 'close': '14:00'},
        },
        'social': {'instagram': '@comptoirfiltre', 'facebook': 'comptoirfiltre'},
    },
    {
        'name': 'Glacé Saint-Germain',
        'address': '40 Boulevard Saint-Germain, 75005 Paris',
        'latitude': 48.8510,
        'longitude': 2.3490,
        'latte_types': [LatteType.ICED, LatteType.MATCHA, LatteType.CHAI],
        'drinks': ['Iced Latte', 'Matcha Latte', 'Chai Latte'],
        'hours': {day: {'open': '11:00', 'close': '24:00'} for day in WEEKDAYS + ('saturday', 'sunday')},
        'social': None,
    },
    {
        'name': 'Café de la Gare',
        'address': 'Gare de Lyon, 75012 Paris',
        'latitude': 48.8443,
        'longitude': 2.3744,
        'latte_types': [LatteType.CAFE],
        'drinks': ['Espresso', 'Flat White'],
        'hours': None,
        'social': None,
    },
    {
        'name': 'Latte Lyonnais',
        'address': 'Place Bellecour, 69002 Lyon',
        'latitude': 45.7578,
        'longitude': 4.8320,
        'latte_types': [LatteType.CAFE, LatteType.MATCHA],
        'drinks': ['Flat White', 'Matcha Latte'],
        'hours': {day: {'open': '08:00', 'close': '18:00'} for day in WEEKDAYS},
        'social': {'email': 'bonjour@lattelyonnais.example.com'},
    },
]

REVIEWS = [
    ('alice', 'Matcha Bar Rivoli', 5, 'Ceremonial grade and perfectly whisked.', LatteType.MATCHA),
    ('bob', 'Matcha Bar Rivoli', 4, 'Great but busy on Saturdays.', LatteType.ICED),
    ('alice', 'Chai Corner', 4, 'Spicy chai with a view.', LatteType.CHAI),
    ('bob', 'Le Comptoir Filtre', 5, 'Best V60 in the 11th.', LatteType.CAFE),
    ('alice', 'Glacé Saint-Germain', 3, 'Too sweet for me.', LatteType.ICED),
]


class Command(BaseCommand):
    help = 'Create sample data for trying out the API'

    def add_arguments(self, parser):
        parser.add_argument(
            '--clear',
            action='store_true',
            help='Clear existing data before creating new sample data',
        )

    @transaction.atomic
    def handle(self, *args, **options):
        if options['clear']:
            self.stdout.write('Clearing existing data...')
            self.clear_data()

        self.stdout.write('Creating sample data...')

        users = self.create_users()
        drinks = self.create_drinks()
        cafes = self.create_cafes(users['admin'], drinks)
        self.create_reviews(users, cafes)
        self.create_favorites(users, cafes)

        self.stdout.write(self.style.SUCCESS('Sample data created successfully!'))
        self.stdout.write('')
        self.stdout.write('Test accounts:')
        self.stdout.write('  admin@example.com / admin123 (backoffice)')
        self.stdout.write('  alice@example.com / password123')
        self.stdout.write('  bob@example.com / password123')

    def clear_data(self):
        """Clear all sample-able data from the database."""
        Favorite.objects.all().delete()
        Review.objects.all().delete()
        Cafe.objects.all().delete()
        Drink.objects.all().delete()
        User.objects.filter(is_superuser=False).delete()
        User.objects.filter(email='admin@example.com').delete()

    def create_users(self):
        """Create test users."""
        self.stdout.write('  Creating users...')

        admin, _ = User.objects.get_or_create(
            email='admin@example.com',
            defaults={
                'username': 'admin',
                'is_staff': True,
                'is_superuser': True,
            }
        )
        admin.set_password('admin123')
        admin.save()

        alice, _ = User.objects.get_or_create(
            email='alice@example.com',
            defaults={'username': 'alice', 'preferred_language': 'fr'}
        )
        alice.set_password('password123')
        alice.save()

        bob, _ = User.objects.get_or_create(
            email='bob@example.com',
            defaults={'username': 'bob', 'preferred_language': 'en'}
        )
        bob.set_password('password123')
        bob.save()

        return {'admin': admin, 'alice': alice, 'bob': bob}

    def create_drinks(self):
        """Create the drink menu."""
        self.stdout.write('  Creating drinks...')

        drinks = {}
        for name, category, icon in DRINKS:
            drink = Drink.objects.filter(name=name).first()
            if drink is None:
                drink = create_drink(name=name, category=category, icon=icon)
            drinks[name] = drink
        return drinks

    def create_cafes(self, admin, drinks):
        """Create cafés through the service layer so hours are validated."""
        self.stdout.write('  Creating cafés...')

        cafes = {}
        for data in CAFES:
            cafe = Cafe.objects.filter(name=data['name']).first()
            if cafe is None:
                cafe = create_cafe(
                    name=data['name'],
                    address=data['address'],
                    latitude=data['latitude'],
                    longitude=data['longitude'],
                    latte_types=data['latte_types'],
                    hours=data['hours'],
                    social=data['social'],
                    drink_ids=[drinks[name].id for name in data['drinks']],
                    created_by=admin,
                )
            cafes[data['name']] = cafe
        return cafes

    def create_reviews(self, users, cafes):
        """Create reviews, which also sets café ratings."""
        self.stdout.write('  Creating reviews...')

        for username, cafe_name, rating, comment, latte_type in REVIEWS:
            user, cafe = users[username], cafes[cafe_name]
            if Review.objects.filter(author=user, cafe=cafe).exists():
                continue
            create_review(
                author=user,
                cafe_id=cafe.id,
                rating=rating,
                comment=comment,
                latte_type=latte_type,
            )

    def create_favorites(self, users, cafes):
        """Save a few favorites."""
        self.stdout.write('  Creating favorites...')

        for name in ('Matcha Bar Rivoli', 'Glacé Saint-Germain'):
            add_favorite(user=users['alice'], cafe_id=cafes[name].id)
        add_favorite(user=users['bob'], cafe_id=cafes['Le Comptoir Filtre'].id)
