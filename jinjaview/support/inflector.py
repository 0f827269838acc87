"""
Inflector
Word inflection (plural/singular, table and class names)
"""
import inflection

from jinjaview.support.str import Str


class Inflector:
    """
    Naming-convention inflections used by the view layer and templates

    Example:
        Inflector.pluralize('person')      # 'people'
        Inflector.tableize('BlogPost')     # 'blog_posts'
        Inflector.classify('blog_posts')   # 'BlogPost'
        Inflector.humanize('author_id')    # 'Author'
    """

    @staticmethod
    def pluralize(word: str) -> str:
        return inflection.pluralize(word)

    @staticmethod
    def singularize(word: str) -> str:
        return inflection.singularize(word)

    @staticmethod
    def camelize(word: str) -> str:
        return inflection.camelize(word)

    @staticmethod
    def underscore(word: str) -> str:
        return inflection.underscore(word)

    @staticmethod
    def dasherize(word: str) -> str:
        return inflection.dasherize(inflection.underscore(word))

    @staticmethod
    def humanize(word: str) -> str:
        return inflection.humanize(word)

    @staticmethod
    def tableize(class_name: str) -> str:
        return inflection.tableize(class_name)

    @staticmethod
    def classify(table_name: str) -> str:
        return inflection.camelize(inflection.singularize(table_name))

    @staticmethod
    def variable(word: str) -> str:
        return inflection.camelize(inflection.underscore(word), False)

    @staticmethod
    def slug(word: str, separator: str = '-') -> str:
        return Str.slug(word, separator)
