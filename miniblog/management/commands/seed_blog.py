"""
Fill the database with fake posts and comments for local development.

    python manage.py seed_blog --posts 30 --comments 15
"""
from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand
from django.db import transaction
from faker import Faker

from ...conf import blog_settings
from ...models import Comment, Post


class Command(BaseCommand):
    help = "Create a test user with fake posts and comments."

    def add_arguments(self, parser):
        parser.add_argument(
            "--posts",
            type=int,
            default=blog_settings.SEED_POSTS,
            help="Number of posts to create",
        )
        parser.add_argument(
            "--comments",
            type=int,
            default=blog_settings.SEED_COMMENTS_PER_POST,
            help="Number of comments per post",
        )
        parser.add_argument(
            "--seed",
            type=int,
            help="Faker seed for repeatable output",
        )

    @transaction.atomic
    def handle(self, *args, **options):
        fake = Faker()
        if options["seed"] is not None:
            fake.seed_instance(options["seed"])

        User = get_user_model()
        user, created = User.objects.get_or_create(
            username="test",
            defaults={
                "email": "test@example.com",
                "first_name": "Test",
                "last_name": "User",
            },
        )
        if created:
            user.set_password("password")
            user.save(update_fields=["password"])

        for _ in range(options["posts"]):
            post = Post.objects.create(
                author=user,
                title=fake.sentence(nb_words=6).rstrip("."),
                body="\n\n".join(fake.paragraphs(nb=4)),
            )
            Comment.objects.bulk_create([
                Comment(post=post, author=user, body=fake.text(max_nb_chars=200))
                for _ in range(options["comments"])
            ])

        self.stdout.write(self.style.SUCCESS(
            f"Seeded {options['posts']} posts with {options['comments']} comments each."
        ))
