class QuizError(Exception):
    pass


class EmptyListError(QuizError):
    pass


class DictionaryUnavailableError(QuizError):
    pass
