from . import db
from datetime import datetime


class Category(db.Model):
    __tablename__ = "categories"
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(120), unique=True, nullable=False)
    slug = db.Column(db.String(120), unique=True, index=True, nullable=False)

    articles = db.relationship("Article", back_populates="category", lazy="select")

    def to_dict(self):
        return {"id": self.id, "name": self.name, "slug": self.slug}

    def __repr__(self):
        return f"<Category {self.slug}>"


class Article(db.Model):
    __tablename__ = "articles"
    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(500), nullable=False)
    slug = db.Column(db.String(255), unique=True, index=True, nullable=False)
    description = db.Column(db.Text, nullable=False)
    content = db.Column(db.Text, nullable=False)
    cover_image_url = db.Column(db.String(1000), nullable=False)
    author_name = db.Column(db.String(255), nullable=False)
    category_id = db.Column(db.Integer, db.ForeignKey("categories.id"), nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)

    category = db.relationship("Category", back_populates="articles")

    def to_dict(self, with_category=False):
        out = {
            "id": self.id,
            "title": self.title,
            "slug": self.slug,
            "description": self.description,
            "content": self.content,
            "coverImageUrl": self.cover_image_url,
            "authorName": self.author_name,
            "categoryId": self.category_id,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
        }
        if with_category:
            out["category"] = self.category.to_dict() if self.category else None
        return out

    def __repr__(self):
        return f"<Article {self.id} {self.slug}>"


class Event(db.Model):
    __tablename__ = "events"
    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(500), nullable=False)
    # display text such as "Oct 15, 2024", never parsed
    date = db.Column(db.String(120), nullable=False)
    location = db.Column(db.String(255), nullable=False)

    def to_dict(self):
        return {"id": self.id, "title": self.title, "date": self.date, "location": self.location}
