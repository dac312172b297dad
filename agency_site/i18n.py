"""Тексты сайта для en / cs / ru.

Ключи вида 'navigation.home'. Если перевода нет - берётся язык по
умолчанию, если нет и там - сам ключ.
"""

DEFAULT_LOCALE = 'cs'

TRANSLATIONS = {
    'en': {
        'navigation.home': 'Home',
        'navigation.aboutUs': 'About us',
        'navigation.forEmployers': 'For employers',
        'navigation.forEmployees': 'For employees',
        'navigation.availableVacancies': 'Available vacancies',
        'navigation.contactUs': 'Contact us',

        'hero.title': 'Express Work',
        'hero.subtitle': 'Reliable staff',
        'hero.accent': 'for your business',
        'hero.description': 'We connect employers with motivated workers across the Czech Republic.',
        'hero.cta': 'Get in touch',

        'about.title': 'About us',
        'about.text': 'We are a staffing agency helping companies find personnel and people find stable work.',
        'employers.title': 'For employers',
        'employers.text': 'Tell us how many people you need and when. We handle selection and paperwork.',
        'employees.title': 'For employees',
        'employees.text': 'Legal employment, regular pay and support with accommodation.',

        'vacancies.title': 'Available vacancies',
        'vacancies.warehouse': 'Warehouse worker',
        'vacancies.production': 'Production line operator',
        'vacancies.forklift': 'Forklift driver',
        'vacancies.cleaning': 'Cleaning staff',
        'vacancies.apply': 'Apply',

        'contact.title': 'Contact us',
        'contact.formType.jobSeeker': 'Looking for a job',
        'contact.formType.employer': 'Request personnel',
        'contact.form.fullName': 'Full name',
        'contact.form.fullNamePlaceholder': 'Jan Novák',
        'contact.form.phoneNumber': 'Phone number',
        'contact.form.phoneNumberPlaceholder': '+420 777 123 456',
        'contact.form.email': 'E-mail',
        'contact.form.emailPlaceholder': 'you@example.com',
        'contact.form.companyName': 'Company name',
        'contact.form.companyNamePlaceholder': 'Your company',
        'contact.form.suggestion': 'Message',
        'contact.form.suggestionPlaceholder': 'Tell us what you are looking for',
        'contact.form.privacyText': 'I agree with the',
        'contact.form.privacyLink': 'Privacy Policy',
        'contact.form.submit': 'Send',
        'contact.form.success': 'Thank you! Your message has been sent.',
        'contact.form.error': 'Something went wrong. Please try again later.',
        'contact.form.csrf': 'The form has expired. Please submit it again.',
        'contact.form.tooLarge': 'The message is too long.',
    },
    'cs': {
        'navigation.home': 'Domů',
        'navigation.aboutUs': 'O nás',
        'navigation.forEmployers': 'Pro zaměstnavatele',
        'navigation.forEmployees': 'Pro zaměstnance',
        'navigation.availableVacancies': 'Volná místa',
        'navigation.contactUs': 'Kontaktujte nás',

        'hero.title': 'Expresní práce',
        'hero.subtitle': 'Spolehliví pracovníci',
        'hero.accent': 'pro vaši firmu',
        'hero.description': 'Propojujeme zaměstnavatele s motivovanými pracovníky po celé České republice.',
        'hero.cta': 'Ozvěte se nám',

        'about.title': 'O nás',
        'about.text': 'Jsme personální agentura, která pomáhá firmám najít personál a lidem stabilní práci.',
        'employers.title': 'Pro zaměstnavatele',
        'employers.text': 'Řekněte nám, kolik lidí a kdy potřebujete. Výběr i papírování zařídíme my.',
        'employees.title': 'Pro zaměstnance',
        'employees.text': 'Legální zaměstnání, pravidelná mzda a pomoc s ubytováním.',

        'vacancies.title': 'Volná místa',
        'vacancies.warehouse': 'Skladník',
        'vacancies.production': 'Operátor výroby',
        'vacancies.forklift': 'Řidič VZV',
        'vacancies.cleaning': 'Úklidový personál',
        'vacancies.apply': 'Mám zájem',

        'contact.title': 'Kontaktujte nás',
        'contact.formType.jobSeeker': 'Hledám práci',
        'contact.formType.employer': 'Poptávám personál',
        'contact.form.fullName': 'Jméno a příjmení',
        'contact.form.fullNamePlaceholder': 'Jan Novák',
        'contact.form.phoneNumber': 'Telefon',
        'contact.form.phoneNumberPlaceholder': '+420 777 123 456',
        'contact.form.email': 'E-mail',
        'contact.form.emailPlaceholder': 'vas@email.cz',
        'contact.form.companyName': 'Název firmy',
        'contact.form.companyNamePlaceholder': 'Vaše firma',
        'contact.form.suggestion': 'Zpráva',
        'contact.form.suggestionPlaceholder': 'Napište nám, co hledáte',
        'contact.form.privacyText': 'Souhlasím se',
        'contact.form.privacyLink': 'zásadami ochrany osobních údajů',
        'contact.form.submit': 'Odeslat',
        'contact.form.success': 'Děkujeme! Vaše zpráva byla odeslána.',
        'contact.form.error': 'Něco se pokazilo. Zkuste to prosím později.',
        'contact.form.csrf': 'Platnost formuláře vypršela. Odešlete jej prosím znovu.',
        'contact.form.tooLarge': 'Zpráva je příliš dlouhá.',
    },
    'ru': {
        'navigation.home': 'Главная',
        'navigation.aboutUs': 'О нас',
        'navigation.forEmployers': 'Работодателям',
        'navigation.forEmployees': 'Соискателям',
        'navigation.availableVacancies': 'Вакансии',
        'navigation.contactUs': 'Связаться с нами',

        'hero.title': 'Экспресс-работа',
        'hero.subtitle': 'Надёжный персонал',
        'hero.accent': 'для вашего бизнеса',
        'hero.description': 'Связываем работодателей с мотивированными работниками по всей Чехии.',
        'hero.cta': 'Связаться',

        'about.title': 'О нас',
        'about.text': 'Мы кадровое агентство: помогаем компаниям найти персонал, а людям - стабильную работу.',
        'employers.title': 'Работодателям',
        'employers.text': 'Сообщите, сколько людей и когда нужно. Подбор и документы берём на себя.',
        'employees.title': 'Соискателям',
        'employees.text': 'Официальное трудоустройство, регулярная зарплата и помощь с жильём.',

        'vacancies.title': 'Вакансии',
        'vacancies.warehouse': 'Работник склада',
        'vacancies.production': 'Оператор производства',
        'vacancies.forklift': 'Водитель погрузчика',
        'vacancies.cleaning': 'Уборщик',
        'vacancies.apply': 'Откликнуться',

        'contact.title': 'Связаться с нами',
        'contact.formType.jobSeeker': 'Ищу работу',
        'contact.formType.employer': 'Нужен персонал',
        'contact.form.fullName': 'Имя и фамилия',
        'contact.form.fullNamePlaceholder': 'Иван Петров',
        'contact.form.phoneNumber': 'Телефон',
        'contact.form.phoneNumberPlaceholder': '+420 777 123 456',
        'contact.form.email': 'E-mail',
        'contact.form.emailPlaceholder': 'you@example.com',
        'contact.form.companyName': 'Название компании',
        'contact.form.companyNamePlaceholder': 'Ваша компания',
        'contact.form.suggestion': 'Сообщение',
        'contact.form.suggestionPlaceholder': 'Расскажите, что вы ищете',
        'contact.form.privacyText': 'Я согласен с',
        'contact.form.privacyLink': 'политикой конфиденциальности',
        'contact.form.submit': 'Отправить',
        'contact.form.success': 'Спасибо! Ваше сообщение отправлено.',
        'contact.form.error': 'Что-то пошло не так. Попробуйте позже.',
        'contact.form.csrf': 'Форма устарела. Отправьте её ещё раз.',
        'contact.form.tooLarge': 'Сообщение слишком длинное.',
    },
}

# Секции страницы в порядке навигации: (якорь, ключ подписи)
SECTIONS = [
    ('home', 'navigation.home'),
    ('about', 'navigation.aboutUs'),
    ('employers', 'navigation.forEmployers'),
    ('employees', 'navigation.forEmployees'),
    ('vacancies', 'navigation.availableVacancies'),
]

VACANCIES = [
    {'key': 'vacancies.warehouse', 'location': 'Praha', 'form': 'jobSeeker'},
    {'key': 'vacancies.production', 'location': 'Plzeň', 'form': 'jobSeeker'},
    {'key': 'vacancies.forklift', 'location': 'Brno', 'form': 'jobSeeker'},
    {'key': 'vacancies.cleaning', 'location': 'Praha', 'form': 'jobSeeker'},
]


def translate(locale, key):
    catalogue = TRANSLATIONS.get(locale) or {}
    if key in catalogue:
        return catalogue[key]
    return TRANSLATIONS[DEFAULT_LOCALE].get(key, key)
