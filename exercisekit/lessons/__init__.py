"""Worked solutions to course exercises: basics, quizzes, lists, errors, iterators, maps and structures."""