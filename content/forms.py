from django import forms

from .models import Article, Category


class ArticleForm(forms.ModelForm):
    # The editor widget writes its markdown into this field before submit
    body = forms.CharField(widget=forms.HiddenInput, required=False)

    class Meta:
        model = Article
        fields = ['title', 'excerpt', 'category', 'body']
        widgets = {
            'title': forms.TextInput(attrs={
                'class': 'form-control',
                'placeholder': 'Title',
                'autofocus': True
            }),
            'excerpt': forms.Textarea(attrs={
                'class': 'form-control',
                'rows': 3,
                'placeholder': 'Short summary for the listing pages'
            }),
            'category': forms.Select(attrs={'class': 'form-select'}),
        }

    def clean_title(self):
        title = self.cleaned_data['title'].strip()
        if not title:
            raise forms.ValidationError('Please enter a title')
        return title

    def clean_body(self):
        body = (self.cleaned_data.get('body') or '').strip()
        if not body:
            raise forms.ValidationError('The article has no content yet')
        return body


class CategoryForm(forms.ModelForm):
    class Meta:
        model = Category
        fields = ['title']
        widgets = {
            'title': forms.TextInput(attrs={
                'class': 'form-control',
                'placeholder': 'Category name'
            }),
        }

    def clean_title(self):
        title = self.cleaned_data['title'].strip()
        if Category.objects.filter(title__iexact=title).exists():
            raise forms.ValidationError('A category with this name already exists')
        return title
