from flask import Blueprint, redirect, url_for

from .controllers import authors, bookinstances, books, genres

site = Blueprint('site', __name__)
catalog = Blueprint('catalog', __name__, url_prefix='/catalog')


@site.route('/')
def home():
    return redirect(url_for('catalog.index'))


# --- Catalog home ---
catalog.add_url_rule('/', 'index', books.index)

# --- Books ---
catalog.add_url_rule('/book/create', 'book_create', books.book_create_get, methods=['GET'])
catalog.add_url_rule('/book/create', 'book_create_post', books.book_create_post, methods=['POST'])
catalog.add_url_rule('/book/<int:book_id>/delete', 'book_delete', books.book_delete_get, methods=['GET'])
catalog.add_url_rule('/book/<int:book_id>/delete', 'book_delete_post', books.book_delete_post, methods=['POST'])
catalog.add_url_rule('/book/<int:book_id>/update', 'book_update', books.book_update_get, methods=['GET'])
catalog.add_url_rule('/book/<int:book_id>/update', 'book_update_post', books.book_update_post, methods=['POST'])
catalog.add_url_rule('/book/<int:book_id>', 'book_detail', books.book_detail)
catalog.add_url_rule('/books', 'book_list', books.book_list)

# --- Authors ---
catalog.add_url_rule('/author/create', 'author_create', authors.author_create_get, methods=['GET'])
catalog.add_url_rule('/author/create', 'author_create_post', authors.author_create_post, methods=['POST'])
catalog.add_url_rule('/author/<int:author_id>/delete', 'author_delete', authors.author_delete_get, methods=['GET'])
catalog.add_url_rule('/author/<int:author_id>/delete', 'author_delete_post', authors.author_delete_post, methods=['POST'])
catalog.add_url_rule('/author/<int:author_id>/update', 'author_update', authors.author_update_get, methods=['GET'])
catalog.add_url_rule('/author/<int:author_id>/update', 'author_update_post', authors.author_update_post, methods=['POST'])
catalog.add_url_rule('/author/<int:author_id>', 'author_detail', authors.author_detail)
catalog.add_url_rule('/authors', 'author_list', authors.author_list)

# --- Genres ---
catalog.add_url_rule('/genre/create', 'genre_create', genres.genre_create_get, methods=['GET'])
catalog.add_url_rule('/genre/create', 'genre_create_post', genres.genre_create_post, methods=['POST'])
catalog.add_url_rule('/genre/<int:genre_id>/delete', 'genre_delete', genres.genre_delete_get, methods=['GET'])
catalog.add_url_rule('/genre/<int:genre_id>/delete', 'genre_delete_post', genres.genre_delete_post, methods=['POST'])
catalog.add_url_rule('/genre/<int:genre_id>/update', 'genre_update', genres.genre_update_get, methods=['GET'])
catalog.add_url_rule('/genre/<int:genre_id>/update', 'genre_update_post', genres.genre_update_post, methods=['POST'])
catalog.add_url_rule('/genre/<int:genre_id>', 'genre_detail', genres.genre_detail)
catalog.add_url_rule('/genres', 'genre_list', genres.genre_list)

# --- Book instances ---
catalog.add_url_rule('/bookinstance/create', 'bookinstance_create',
                     bookinstances.bookinstance_create_get, methods=['GET'])
catalog.add_url_rule('/bookinstance/create', 'bookinstance_create_post',
                     bookinstances.bookinstance_create_post, methods=['POST'])
catalog.add_url_rule('/bookinstance/<int:bookinstance_id>/delete', 'bookinstance_delete',
                     bookinstances.bookinstance_delete_get, methods=['GET'])
catalog.add_url_rule('/bookinstance/<int:bookinstance_id>/delete', 'bookinstance_delete_post',
                     bookinstances.bookinstance_delete_post, methods=['POST'])
catalog.add_url_rule('/bookinstance/<int:bookinstance_id>/update', 'bookinstance_update',
                     bookinstances.bookinstance_update_get, methods=['GET'])
catalog.add_url_rule('/bookinstance/<int:bookinstance_id>/update', 'bookinstance_update_post',
                     bookinstances.bookinstance_update_post, methods=['POST'])
catalog.add_url_rule('/bookinstance/<int:bookinstance_id>', 'bookinstance_detail',
                     bookinstances.bookinstance_detail)
catalog.add_url_rule('/bookinstances', 'bookinstance_list', bookinstances.bookinstance_list)
